"""JSON results with soft content negotiation for aiohttp."""
__author__ = 'Vladimir Bolshakov'
__email__ = 'vovanbo@gmail.com'
__version__ = '0.1.0'
VERSION = __version__

from aiohttp_json_result.common import NamingPolicy
from aiohttp_json_result.decorators import json_result_handler
from aiohttp_json_result.encoder import SerializerSettings
from aiohttp_json_result.formatters import JsonOutputFormatter
from aiohttp_json_result.negotiation import select_content_type
from aiohttp_json_result.result import JsonResult, json_result
from aiohttp_json_result.setup import setup_json_result
