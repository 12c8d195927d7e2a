from gcplog import ERROR, WARNING, new

def main():
    log_warn = new(WARNING)
    log_error = new(ERROR)

    log_warn.print("This is a Warning Message")
    print()
    log_error.printf("failed to fetch %s after %d attempts", "orders.json", 3)
    print()
    log_warn.prefix_print("disk usage at ", 91, "%")  # {"severity":"WARNING","message":"WARNING: disk usage at 91%"}
    print()

    log = new()
    log.set_severity("critical")
    log.prefix_fatal("giving up")

if __name__ == "__main__":
    main()
