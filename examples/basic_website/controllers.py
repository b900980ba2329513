"""Handlers of ``/JsonResult/*`` endpoints."""

from aiohttp import web

from aiohttp_json_result import JsonOutputFormatter, JsonResult, NamingPolicy, SerializerSettings
from aiohttp_json_result.decorators import json_result_handler

routes = web.RouteTableDef()

camel_case_settings = SerializerSettings(naming_policy=NamingPolicy.CAMEL_CASE)

# Formatter instance is shared between requests
camel_case_formatter = JsonOutputFormatter(camel_case_settings)


def hello():
    return {'Message': 'hello'}


@routes.get('/JsonResult/Plain', name='json_result.plain')
async def plain(request: web.Request) -> JsonResult:
    return JsonResult(hello())


@routes.get('/JsonResult/CustomFormatter', name='json_result.custom_formatter')
async def custom_formatter(request: web.Request) -> JsonResult:
    return JsonResult(hello(), formatter=camel_case_formatter)


@routes.get('/JsonResult/CustomContentType', name='json_result.custom_content_type')
@json_result_handler('application/message+json')
async def custom_content_type(request: web.Request):
    return hello()


@routes.get('/JsonResult/CustomSerializerSettings', name='json_result.custom_serializer_settings')
async def custom_serializer_settings(request: web.Request) -> JsonResult:
    return JsonResult(hello(), serializer_settings=camel_case_settings)


@routes.get('/JsonResult/Null', name='json_result.null')
async def null(request: web.Request) -> JsonResult:
    return JsonResult(None)


@routes.get('/JsonResult/String', name='json_result.string')
async def string(request: web.Request) -> JsonResult:
    return JsonResult('hello')


@routes.get('/JsonResult/Broken', name='json_result.broken')
async def broken(request: web.Request) -> JsonResult:
    # Bytes are not serializable to JSON
    return JsonResult(b'hello')
