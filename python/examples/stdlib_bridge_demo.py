import logging
from gcplog import init, shutdown

def main():
    init(level=logging.DEBUG, prefix=True)
    log = logging.getLogger("orders")
    log.debug("loaded %d orders", 12)
    log.warning("order %s is late", "A-1001")
    try:
        {}["missing"]
    except KeyError:
        log.exception("lookup failed")
    shutdown()

if __name__ == "__main__":
    main()
