"""
Shared fixtures: fake upstream APIs served through httpx.MockTransport
"""
import pytest
import httpx
from collections import Counter
from typing import Any, Callable, Dict, Union

from app.config import Settings


RANDOMUSER_HOST = "randomuser.test"
RESTCOUNTRIES_HOST = "restcountries.test"
COUNTRYLAYER_HOST = "countrylayer.test"
EXCHANGE_HOST = "exchange.test"
NEWS_HOST = "news.test"


def make_settings(**overrides) -> Settings:
    """Settings pointing every upstream at a fake host"""
    values = dict(
        RANDOMUSER_API_URL=f"https://{RANDOMUSER_HOST}",
        RESTCOUNTRIES_API_URL=f"https://{RESTCOUNTRIES_HOST}",
        COUNTRYLAYER_API_URL=f"https://{COUNTRYLAYER_HOST}",
        EXCHANGE_RATE_API_URL=f"https://{EXCHANGE_HOST}",
        NEWS_API_URL=f"https://{NEWS_HOST}",
        COUNTRYLAYER_API_KEY="countrylayer-key",
        EXCHANGE_RATE_API_KEY="exchange-key",
        NEWS_API_KEY="news-key",
        HTTP_TIMEOUT=2.0,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


def randomuser_payload(country: str = "Kazakhstan") -> Dict[str, Any]:
    return {
        "results": [{
            "gender": "female",
            "name": {"title": "Ms", "first": "Aigerim", "last": "Nurlanova"},
            "location": {
                "street": {"number": 42, "name": "Abay Avenue"},
                "city": "Almaty",
                "state": "Almaty Region",
                "country": country,
            },
            "dob": {"date": "1985-03-07T10:21:13.000Z", "age": 40},
            "picture": {
                "large": "https://randomuser.me/api/portraits/women/12.jpg",
                "medium": "https://randomuser.me/api/portraits/med/women/12.jpg",
            },
        }],
        "info": {"results": 1},
    }


def restcountries_payload(currency: str = "KZT") -> list:
    return [{
        "name": {"common": "Kazakhstan", "official": "Republic of Kazakhstan"},
        "capital": ["Astana"],
        "languages": {"kaz": "Kazakh", "rus": "Russian"},
        "currencies": {currency: {"name": "Kazakhstani tenge", "symbol": "₸"}} if currency else {},
        "flags": {"png": "https://flagcdn.com/w320/kz.png", "svg": "https://flagcdn.com/kz.svg"},
    }]


def exchange_payload(base: str = "KZT", rates: Dict[str, float] = None) -> Dict[str, Any]:
    return {
        "result": "success",
        "base_code": base,
        "conversion_rates": rates if rates is not None else {"USD": 0.0021, "KZT": 1.0},
    }


def news_payload(count: int = 3) -> Dict[str, Any]:
    return {
        "status": "ok",
        "totalResults": count,
        "articles": [
            {
                "title": f"Headline {i}",
                "description": f"Story {i}",
                "url": f"https://news.example/{i}",
                "urlToImage": f"https://news.example/{i}.jpg",
            }
            for i in range(count)
        ],
    }


Handler = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeUpstreams:
    """Routes requests by host to canned responses and counts calls per host"""

    def __init__(self):
        self.calls = Counter()
        self.requests = []
        self.handlers: Dict[str, Handler] = {
            RANDOMUSER_HOST: httpx.Response(200, json=randomuser_payload()),
            RESTCOUNTRIES_HOST: httpx.Response(200, json=restcountries_payload()),
            EXCHANGE_HOST: httpx.Response(200, json=exchange_payload()),
            NEWS_HOST: httpx.Response(200, json=news_payload()),
        }
        self.transport = httpx.MockTransport(self._dispatch)

    def set(self, host: str, handler: Handler):
        self.handlers[host] = handler

    def fail(self, host: str, status_code: int = 500):
        self.handlers[host] = httpx.Response(status_code, json={"message": "upstream exploded"})

    def disconnect(self, host: str):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        self.handlers[host] = handler

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        self.calls[host] += 1
        self.requests.append(request)

        handler = self.handlers.get(host)
        if handler is None:
            return httpx.Response(404, json={"message": f"no fake for {host}"})
        if callable(handler):
            return handler(request)
        # Responses are single-use once read, so hand out a copy
        return httpx.Response(handler.status_code, content=handler.content, headers=handler.headers)


@pytest.fixture
def upstreams():
    return FakeUpstreams()


@pytest.fixture
def settings():
    return make_settings()
