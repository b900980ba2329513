import pytest
from aiohttp import web

from aiohttp_json_result import setup_json_result


@pytest.fixture
async def basic_website_app():
    from examples.basic_website.main import init
    return await init(log_errors=False)


@pytest.fixture
async def basic_website_client(basic_website_app, aiohttp_client):
    return await aiohttp_client(basic_website_app)


@pytest.fixture
def make_client(aiohttp_client):
    """Make test client of application with single ``GET /`` handler."""
    async def factory(handler, setup=True, **options):
        app = web.Application()
        app.router.add_get('/', handler)
        if setup:
            setup_json_result(app, **options)
        return await aiohttp_client(app)

    return factory
