"""Ordered rule catalog.

Rules are evaluated top to bottom and the first rule to supply a slot wins
it, so the order below is part of the behavior. Device and OS rules come
first; "Mobile" precedes "Android" and "Windows" so that "Android Mobile"
and "Windows Mobile" read as phones. Bots precede apps, and apps precede the
browser signatures they embed.
"""

from __future__ import annotations

from typing import NamedTuple


class Rule(NamedTuple):
    """A substring and the slot values it implies. Empty means no opinion."""

    find: str
    device_type: str = ""
    os_name: str = ""
    client_type: str = ""
    client_name: str = ""


def _bot(find: str, name: str) -> Rule:
    return Rule(find, client_type="Bot", client_name=name)


def _app(find: str, name: str) -> Rule:
    return Rule(find, client_type="App", client_name=name)


def _browser(find: str, name: str) -> Rule:
    return Rule(find, client_type="Browser", client_name=name)


RULES: tuple[Rule, ...] = (
    # Devices and operating systems
    Rule("Macintosh", device_type="Desktop", os_name="macOS"),
    Rule("iPad", device_type="Tablet", os_name="iPadOS"),
    Rule("iPhone", device_type="Mobile", os_name="iOS"),
    Rule("Mobile", device_type="Mobile"),
    Rule("Android", device_type="Tablet", os_name="Android"),
    Rule("Windows", device_type="Desktop", os_name="Windows"),
    Rule("CrOS", device_type="Desktop", os_name="ChromeOS"),
    Rule("Tizen", os_name="Tizen"),
    Rule("Linux", os_name="Linux"),
    # Bots
    _bot("pa11y", "Pa11y"),
    _bot("AhrefsBot", "AhrefsBot"),
    _bot("Applebot", "Applebot"),
    _bot("Baiduspider", "Baiduspider"),
    _bot("adidxbot", "AdIdxBot"),
    _bot("bingbot", "Bingbot"),
    _bot("BingPreview", "BingPreview"),
    _bot("Cincraw", "Cincraw"),
    _bot("facebookexternalhit", "FacebookBot"),
    _bot("Googlebot", "Googlebot"),
    _bot("AdsBot-Google", "Google-AdsBot"),
    _bot("Google-Adwords", "Google-AdWords"),
    _bot("Google-Read-Aloud", "Google-Read-Aloud"),
    _bot("Google-Structured-Data-Testing-Tool", "Google-Testing"),
    _bot("HeadlessChrome", "HeadlessChrome"),
    _bot("HubSpot", "HubSpot"),
    _bot("Linespider", "Linespider"),
    _bot("PagePeeker", "PagePeeker"),
    _bot("Pinterestbot", "Pinterestbot"),
    _bot("Seekport", "Seekport"),
    _bot("SeoSiteCheckup", "SeoSiteCheckup"),
    _bot("Sitebulb", "Sitebulb"),
    _bot("SiteScoreBot", "SiteScoreBot"),
    _bot("SMTBot", "SMTBot"),
    _bot("Yeti", "Yeti"),
    _bot("YisouSpider", "YisouSpider"),
    # Applications
    _app("FBSV", "Facebook"),  # iOS
    _app("FBAV", "Facebook"),  # Android
    _app("GSA/", "GoogleSearch"),
    _app("Instagram", "Instagram"),
    _app("LinkedInApp", "LinkedIn"),
    _app("Pinterest", "Pinterest"),
    _app("Snapchat", "Snapchat"),
    _app("MicroMessenger", "WeChat"),
    # Browsers
    _browser("ADG/", "AOLDesktop"),
    _browser("Silk", "Silk"),
    _browser("FxiOS", "Firefox"),
    _browser("Klarna", "Firefox"),
    _browser("Firefox", "Firefox"),
    _browser("EdgA/", "Edge"),
    _browser("EdgiOS/", "Edge"),
    _browser("EdgW/", "Edge"),
    _browser("Edg/", "Edge"),
    _browser("Edge/", "Edge"),
    _browser("MSIE", "InternetExplorer"),
    _browser("Trident", "InternetExplorer"),
    _browser("OPR/", "Opera"),
    _browser("OPT/", "Opera"),
    _browser("DuckDuckGo", "DuckDuckGo"),
    _browser("SamsungBrowser", "SamsungBrowser"),
    _browser("CriOS", "Chrome"),
    _browser("Chrome", "Chrome"),
    _browser("Safari", "Safari"),
)
