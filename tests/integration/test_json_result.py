import json

import pytest
from aiohttp import hdrs


JSON_RESULT_SCENARIOS = [
    # path, accept, expected content type, expected body
    ('/JsonResult/Plain', 'application/json', 'application/json', '{"Message":"hello"}'),
    ('/JsonResult/Plain', 'text/json', 'text/json', '{"Message":"hello"}'),
    ('/JsonResult/Plain', 'application/xml', 'application/json', '{"Message":"hello"}'),
    ('/JsonResult/Plain', 'text/xml', 'application/json', '{"Message":"hello"}'),
    ('/JsonResult/Null', None, 'application/json', 'null'),
    ('/JsonResult/String', None, 'application/json', '"hello"'),
    ('/JsonResult/CustomFormatter', 'application/json', 'application/json', '{"message":"hello"}'),
    ('/JsonResult/CustomFormatter', 'text/json', 'text/json', '{"message":"hello"}'),
    ('/JsonResult/CustomFormatter', 'application/xml', 'application/json', '{"message":"hello"}'),
    ('/JsonResult/CustomFormatter', 'text/xml', 'application/json', '{"message":"hello"}'),
    ('/JsonResult/CustomContentType', None, 'application/message+json', '{"Message":"hello"}'),
]


class TestJsonResult:
    """JSON result endpoints"""

    @pytest.mark.parametrize('path,accept,content_type,body', JSON_RESULT_SCENARIOS)
    async def test_response(self, basic_website_client, path, accept, content_type, body):
        headers = {hdrs.ACCEPT: accept} if accept is not None else {}
        response = await basic_website_client.get(path, headers=headers)
        assert response.status == 200
        assert response.content_type == content_type
        assert await response.text() == body

    async def test_custom_serializer_settings(self, basic_website_client):
        response = await basic_website_client.get('/JsonResult/CustomSerializerSettings')
        assert response.status == 200
        assert await response.text() == '{"message":"hello"}'

    @pytest.mark.parametrize('accept', ('application/xml', 'text/xml', 'application/message+json'))
    async def test_declared_content_type_ignores_accept(self, basic_website_client, accept):
        response = await basic_website_client.get(
            '/JsonResult/CustomContentType',
            headers={hdrs.ACCEPT: accept},
        )
        assert response.status == 200
        assert response.content_type == 'application/message+json'
        assert await response.text() == '{"Message":"hello"}'

    async def test_null_is_not_no_content(self, basic_website_client):
        """
        If the object is null, it will get formatted as JSON.
        NOT as a 204 No Content.
        """
        response = await basic_website_client.get('/JsonResult/Null')
        assert response.status == 200
        assert await response.read() == b'null'

    async def test_string_is_not_plain_text(self, basic_website_client):
        """
        If the object is a string, it will get formatted as JSON.
        NOT as text/plain.
        """
        response = await basic_website_client.get(
            '/JsonResult/String',
            headers={hdrs.ACCEPT: 'text/plain'},
        )
        assert response.status == 200
        assert response.content_type == 'application/json'
        assert await response.json() == 'hello'

    async def test_charset(self, basic_website_client):
        response = await basic_website_client.get('/JsonResult/Plain')
        assert response.charset == 'utf-8'

    @pytest.mark.parametrize('path,accept,content_type,body', JSON_RESULT_SCENARIOS)
    async def test_repeated_requests_are_identical(self, basic_website_client,
                                                   path, accept, content_type, body):
        headers = {hdrs.ACCEPT: accept} if accept is not None else {}
        responses = []
        for _ in range(3):
            response = await basic_website_client.get(path, headers=headers)
            responses.append((
                response.status,
                response.headers[hdrs.CONTENT_TYPE],
                await response.read(),
            ))
        assert len(set(responses)) == 1

    async def test_serialization_error(self, basic_website_client):
        response = await basic_website_client.get('/JsonResult/Broken')
        assert response.status == 500
        assert response.content_type == 'application/json'

        document = json.loads(await response.text())
        error, = document['errors']
        assert error['status'] == '500'
        assert error['title'] == 'Internal Server Error'
        assert "'bytes'" in error['detail']
