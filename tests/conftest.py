"""Shared fixtures: settings, canned HTML pages and a fake page source."""

import threading

import pytest
import requests

from papertrend.config.settings import Settings

ORIGIN = "https://huggingface.co"


class FakePageSource:
    """Serves canned HTML by URL; unknown URLs fail like a dead host."""

    def __init__(self, pages: dict[str, str] | None = None, errors: dict[str, Exception] | None = None):
        self.pages = dict(pages or {})
        self.errors = dict(errors or {})
        self.requested: list[str] = []
        self._lock = threading.Lock()

    def fetch(self, url: str) -> str:
        with self._lock:
            self.requested.append(url)
        if url in self.errors:
            raise self.errors[url]
        if url not in self.pages:
            raise requests.ConnectionError(f"no route to {url}")
        return self.pages[url]


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session; unknown URLs raise ConnectionError."""

    def __init__(self, responses: dict[str, FakeResponse]):
        self.responses = responses
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url, timeout):
        self.calls.append((url, timeout))
        if url not in self.responses:
            raise requests.ConnectionError(f"no route to {url}")
        return self.responses[url]

    def close(self):
        self.closed = True


def article(href: str, title: str, extra: str = "") -> str:
    return (
        '<article class="relative flex flex-col overflow-hidden rounded-xl border">'
        f'<div class="p-4"><h3 class="mb-1 text-lg font-semibold"><a href="{href}" class="line-clamp-3">{title}</a></h3>'
        f"{extra}</div></article>"
    )


def listing_page(*blocks: str) -> str:
    body = "\n".join(blocks)
    return (
        "<!doctype html><html><head><title>Daily Papers - Hugging Face</title></head>"
        f'<body><main><section class="grid grid-cols-1 gap-4">\n{body}\n</section></main></body></html>'
    )


def detail_page(
    summary: str | None = None,
    abstract: str | None = None,
    meta: str | None = None,
    links: tuple[str, ...] = (),
) -> str:
    head = "<head><title>Paper page</title>"
    if meta is not None:
        head += f'<meta name="description" content="{meta}">'
    head += "</head>"

    parts = []
    if summary is not None:
        parts.append(
            '<div class="rounded-xl bg-blue-500/6 px-4 py-3 dark:bg-blue-500/10">'
            '<h3 class="text-sm font-semibold">AI-generated summary</h3>'
            f'<p class="text-blue-700">{summary}</p></div>'
        )
    if abstract is not None:
        parts.append(
            '<h2 class="text-xl font-semibold">Abstract</h2>\n'
            '  <div class="flex flex-col gap-y-2.5">\n'
            f'    <p class="text-gray-600 dark:text-gray-400">{abstract}</p></div>'
        )
    for link in links:
        parts.append(f'<a href="{link}" target="_blank">{link}</a>')
    return f"<html>{head}<body>{''.join(parts)}</body></html>"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_source():
    return FakePageSource
