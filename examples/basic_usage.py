#!/usr/bin/env python3
"""Basic usage example"""

import threading

from event_logger import Logger, LoggerBuilder, Tag
from event_logger.core.logger_config import DispatchMode


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_dispatch_mode(DispatchMode.MAIN_THREAD)
        .build())

    network = Tag("network")

    # Log messages from the main thread land immediately
    logger.success("Application started", tags=[network])
    logger.debug("This is debug")
    logger.info("Connecting")
    logger.warning("Slow response", tags=[network])
    logger.error("Request failed", ConnectionError("timed out"), tags=[network])

    # Appends from other threads wait until the main thread pumps them
    worker = threading.Thread(target=lambda: logger.info("Hello from a worker"))
    worker.start()
    worker.join()
    logger.flush()

    print(logger.blob)

    # The shared default logger
    Logger.default().info("Done")


if __name__ == "__main__":
    main()
