"""
HTTP client for the hanmorph API.
"""

import httpx

from hanmorph.core.config import get_settings

BASE_URL = get_settings().api_url


def lookup_word(category: str, word: str) -> dict:
    r = httpx.get(f"{BASE_URL}/dictionary/{category}/{word}")
    r.raise_for_status()
    return r.json()


def add_words(category: str, words: list[str]) -> dict:
    r = httpx.post(f"{BASE_URL}/dictionary/{category}", json={"words": words})
    r.raise_for_status()
    return r.json()


def remove_words(category: str, words: list[str]) -> dict:
    # httpx.delete() takes no body.
    r = httpx.request("DELETE", f"{BASE_URL}/dictionary/{category}", json={"words": words})
    r.raise_for_status()
    return r.json()
