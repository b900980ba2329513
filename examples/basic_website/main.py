#!/usr/bin/env python
"""Basic web site with JSON result endpoints."""

import logging
import time

from aiohttp import web

from aiohttp_json_result import setup_json_result


async def init(*, log_errors: bool = True) -> web.Application:
    from examples.basic_website.controllers import routes

    app = web.Application()
    app.add_routes(routes)

    # Middleware installed here renders JsonResult instances
    # returned by handlers.
    setup_json_result(app, log_errors=log_errors)
    return app


def main():
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(levelname)-8s [%(asctime)s.%(msecs)03d] '
               '(%(name)s): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.Formatter.converter = time.gmtime

    # More useful log format than default
    log_format = '%a %t "%r" %s %b %Tf "%{Accept}i" "%{User-Agent}i"'
    web.run_app(init(), access_log_format=log_format)


if __name__ == '__main__':
    main()
