#!/usr/bin/env python3
"""Basic usage example"""

from logtree import LoggerBuilder, LogLevel, Logger
from logtree.formatters import TextFormatter


def main():
    # Root gets the console; children inherit its level unless they set one
    (LoggerBuilder()
        .with_level(LogLevel.INFO)
        .with_console(colored=True)
        .build())

    db = (LoggerBuilder()
        .with_name("app.db")
        .with_level(LogLevel.DEBUG)
        .with_file("logs/db.log")
        .with_formatter(TextFormatter("{timestamp} {level:5} #{index} {message}"))
        .build())

    app = Logger.get_instance("app")
    app.info("Application started")
    app.debug("Not shown: app inherits INFO from the root")

    for i, table in enumerate(["users", "orders"]):
        db.debug("opened table %s", table, index=i)

    with app.stream(LogLevel.WARN) as out:
        out.write("slow queries: ").write(2)

    Logger.shutdown()


if __name__ == "__main__":
    main()
