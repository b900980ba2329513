from http import HTTPStatus

import attr
import pytest
from aiohttp import hdrs, web

from aiohttp_json_result import (
    JsonOutputFormatter, JsonResult, NamingPolicy, SerializerSettings, json_result,
)
from aiohttp_json_result.decorators import json_result_handler

camel_case = SerializerSettings(naming_policy=NamingPolicy.CAMEL_CASE)


class TestJsonResult:
    def test_defaults(self):
        result = json_result({'Message': 'hello'})
        assert result.value == {'Message': 'hello'}
        assert result.content_type is None
        assert result.serializer_settings is None
        assert result.formatter is None
        assert result.status is HTTPStatus.OK

    def test_immutable(self):
        result = JsonResult('hello')
        with pytest.raises(attr.exceptions.FrozenInstanceError):
            result.value = 'bye'

    def test_validation(self):
        with pytest.raises(TypeError):
            JsonResult('hello', serializer_settings={'naming_policy': 'camel_case'})
        with pytest.raises(TypeError):
            JsonResult('hello', formatter=object())
        with pytest.raises(TypeError):
            JsonResult('hello', content_type=b'application/json')
        with pytest.raises(ValueError):
            JsonResult('hello', status=999)

    def test_formatter_precedence(self):
        app = web.Application()
        formatter = JsonOutputFormatter(supported_media_types=('application/json',))
        result = JsonResult('hello', serializer_settings=camel_case, formatter=formatter)
        assert result.get_formatter(app) is formatter

        result = JsonResult('hello', serializer_settings=camel_case)
        assert result.get_formatter(app).settings is camel_case

    @pytest.mark.parametrize('content_type', [
        'application',
        'application/',
        'a/b/c',
        'application/json; charset=no-such-charset',
    ])
    def test_invalid_content_type(self, content_type):
        with pytest.raises(ValueError):
            JsonResult('hello', content_type=content_type)

    def test_iterator_is_read_out(self):
        result = JsonResult(x * 2 for x in (1, 2, 3))
        assert result.value == [2, 4, 6]
        assert JsonResult(iter({'Message': 'hello'}.items())).value == [('Message', 'hello')]

    async def test_shared_result_with_generator(self, make_client):
        result = JsonResult(x for x in ('a', 'b'))

        async def handler(request):
            return result

        client = await make_client(handler)
        for _ in range(2):
            response = await client.get('/')
            assert await response.text() == '["a","b"]'

    @pytest.mark.parametrize('content_type,charset', [
        ('application/message+json; charset=utf-8', 'utf-8'),
        ('application/message+json; charset=latin-1', 'latin-1'),
        ('application/message+json; version=2', 'utf-8'),
    ])
    async def test_declared_content_type_with_parameters(self, make_client, content_type, charset):
        async def handler(request):
            return JsonResult({'Message': 'h\u00e9llo'}, content_type=content_type)

        client = await make_client(handler)
        response = await client.get('/', headers={hdrs.ACCEPT: 'text/json'})
        assert response.status == 200
        assert response.content_type == 'application/message+json'
        assert response.headers[hdrs.CONTENT_TYPE].startswith(content_type)
        assert await response.read() == '{"Message":"h\u00e9llo"}'.encode(charset)

    async def test_status(self, make_client):
        async def handler(request):
            return JsonResult({'Message': 'created'}, status=201)

        client = await make_client(handler)
        response = await client.get('/')
        assert response.status == 201
        assert await response.json() == {'Message': 'created'}

    async def test_application_serializer_settings(self, make_client):
        async def handler(request):
            return JsonResult({'Message': 'hello'})

        client = await make_client(handler, serializer_settings=camel_case)
        response = await client.get('/')
        assert await response.text() == '{"message":"hello"}'


class TestJsonResultHandler:
    @pytest.mark.parametrize('accept,content_type', [
        ('text/json', 'text/json'),
        ('text/xml', 'application/json'),
    ])
    async def test_plain_value(self, make_client, accept, content_type):
        @json_result_handler()
        async def handler(request):
            return {'Message': 'hello'}

        client = await make_client(handler, setup=False)
        response = await client.get('/', headers={hdrs.ACCEPT: accept})
        assert response.status == 200
        assert response.content_type == content_type
        assert await response.text() == '{"Message":"hello"}'

    async def test_options(self, make_client):
        @json_result_handler('application/message+json', serializer_settings=camel_case)
        async def handler(request):
            return {'Message': 'hello'}

        client = await make_client(handler, setup=False)
        response = await client.get('/', headers={hdrs.ACCEPT: 'application/json'})
        assert response.content_type == 'application/message+json'
        assert await response.text() == '{"message":"hello"}'

    async def test_result_is_rendered(self, make_client):
        @json_result_handler('application/message+json')
        async def handler(request):
            return JsonResult(None)

        client = await make_client(handler, setup=False)
        response = await client.get('/')
        assert response.content_type == 'application/json'
        assert await response.text() == 'null'

    async def test_response_is_left_as_is(self, make_client):
        @json_result_handler()
        async def handler(request):
            return web.Response(text='hello')

        client = await make_client(handler, setup=False)
        response = await client.get('/')
        assert response.content_type == 'text/plain'
        assert await response.text() == 'hello'
