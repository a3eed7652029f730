#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/rules/url.py

import functools
import re
from typing import Iterable, List, Optional
from urllib.parse import urlsplit

from shadelab.core import config as c
from shadelab.shared.logger import log

IPV6_HOST = re.compile(r"\[.*?\](\:\d+)?")
SCHEME_PREFIX = re.compile(r"^.*?\/{2,3}")


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def create_url_regex(url_template: str) -> "re.Pattern":
    """
    Compile a site template into a case-insensitive regex.

    Templates look like `example.com`, `*.example.com/path`, `mail.*.com`.
    A leading `^` pins the match to the start of the host (no subdomains),
    a trailing `$` pins it to the end of the path.
    """
    template = url_template.strip()
    exact_beginning = template.startswith("^")
    exact_ending = template.endswith("$")

    template = template[1:] if exact_beginning else template
    template = template[:-1] if exact_ending else template
    template = SCHEME_PREFIX.sub("", template, count=1)
    template = template.split("?", 1)[0]
    if template.endswith("/"):
        template = template[:-1]

    slash = template.find("/")
    host_part = template if slash < 0 else template[:slash]
    path_part = None if slash < 0 else template[slash:]

    result = r"^(.*?\:\/{2,3})?"
    if not exact_beginning:
        # Any subdomain
        result += r"([^\/]*?\.)?"

    host_parts = [r"[^\.\/]+?" if part == "*" else re.escape(part) for part in host_part.split(".")]
    result += "(" + r"\.".join(host_parts) + ")"

    if path_part:
        result += "(" + re.escape(path_part) + ")"

    if exact_ending:
        result += r"(\/?(\?[^\/]*?)?)$"
    else:
        result += r"(\/?.*?)$"

    return re.compile(result, re.IGNORECASE)


def is_ipv6(url: str) -> bool:
    open_bracket = url.find("[")
    if open_bracket < 0:
        return False
    query = url.find("?")
    return query < 0 or open_bracket < query


def compare_ipv6(first: str, second: str) -> bool:
    a = IPV6_HOST.search(first)
    b = IPV6_HOST.search(second)
    if a is None or b is None:
        return False
    return a.group(0) == b.group(0)


def is_url_matched(url: str, url_template: str) -> bool:
    url_ipv6 = is_ipv6(url)
    template_ipv6 = is_ipv6(url_template)
    if url_ipv6 and template_ipv6:
        return compare_ipv6(url, url_template)
    if url_ipv6 or template_ipv6:
        return False
    return create_url_regex(url_template).search(url) is not None


def is_url_in_list(url: str, templates: Iterable[str]) -> bool:
    return any(is_url_matched(url, t) for t in templates)


matches_any = is_url_in_list


def filter_valid_patterns(patterns: Iterable[str], source: Optional[str] = None) -> List[str]:
    """
    Keep the patterns that can match something; log and drop the rest.
    Empty patterns and bracketed hosts without a closing `]` never match.
    """
    valid = []
    for pattern in patterns:
        if not pattern or not pattern.strip():
            log("warning", "skipping empty url pattern", source=source)
            continue
        if is_ipv6(pattern) and IPV6_HOST.search(pattern) is None:
            log("warning", f"skipping url pattern with unbalanced '[': '{pattern}'", source=source)
            continue
        valid.append(pattern)
    return valid


def get_url_host_or_protocol(url: str) -> str:
    """Host with port for web URLs; otherwise the scheme with its colon."""
    parts = urlsplit(url)
    if parts.netloc:
        return parts.netloc
    if parts.scheme:
        return f"{parts.scheme}:"
    return url
