"""Matcher that searches the titles and descriptions of an RSS feed."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from urllib.error import HTTPError
from urllib.request import urlopen

from patternkit.search import Feed, Result, register

log = logging.getLogger(__name__)


@dataclass
class Item:
    """An item element of an RSS channel."""

    pub_date: str = ""
    title: str = ""
    description: str = ""
    link: str = ""
    guid: str = ""
    geo_rss_point: str = ""


@dataclass
class Image:
    """The image element of an RSS channel."""

    url: str = ""
    title: str = ""
    link: str = ""


@dataclass
class Channel:
    """The channel element of an RSS document."""

    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = ""
    last_build_date: str = ""
    ttl: str = ""
    language: str = ""
    managing_editor: str = ""
    web_master: str = ""
    image: Image = field(default_factory=Image)
    items: list[Item] = field(default_factory=list)


@dataclass
class RssDocument:
    """A whole RSS document."""

    channel: Channel = field(default_factory=Channel)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(elem: ET.Element, name: str) -> ET.Element | None:
    return next((c for c in elem if _local(c.tag) == name), None)


def _text(elem: ET.Element, name: str) -> str:
    child = _child(elem, name)
    if child is None:
        return ""
    # Direct character data only; nested elements are skipped.
    return (child.text or "") + "".join(g.tail or "" for g in child)


def _parse_item(elem: ET.Element) -> Item:
    return Item(
        pub_date=_text(elem, "pubDate"),
        title=_text(elem, "title"),
        description=_text(elem, "description"),
        link=_text(elem, "link"),
        guid=_text(elem, "guid"),
        geo_rss_point=_text(elem, "point"),
    )


def _parse_channel(elem: ET.Element) -> Channel:
    image_elem = _child(elem, "image")
    image = (
        Image(
            url=_text(image_elem, "url"),
            title=_text(image_elem, "title"),
            link=_text(image_elem, "link"),
        )
        if image_elem is not None
        else Image()
    )
    return Channel(
        title=_text(elem, "title"),
        description=_text(elem, "description"),
        link=_text(elem, "link"),
        pub_date=_text(elem, "pubDate"),
        last_build_date=_text(elem, "lastBuildDate"),
        ttl=_text(elem, "ttl"),
        language=_text(elem, "language"),
        managing_editor=_text(elem, "managingEditor"),
        web_master=_text(elem, "webMaster"),
        image=image,
        items=[_parse_item(c) for c in elem if _local(c.tag) == "item"],
    )


def parse_document(data: bytes | str) -> RssDocument:
    """Decode an RSS document; raises ValueError if it is not one."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as err:
        raise ValueError(f"invalid rss document: {err}") from err
    if _local(root.tag) != "rss":
        raise ValueError(f"expected element type <rss> but have <{_local(root.tag)}>")
    channel_elem = _child(root, "channel")
    channel = _parse_channel(channel_elem) if channel_elem is not None else Channel()
    return RssDocument(channel=channel)


class RssMatcher:
    """Searches item titles and descriptions of RSS feeds with a regex."""

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        log.info(
            "Search Feed Type[%s] Site[%s] For URI[%s]", feed.type, feed.name, feed.uri
        )
        document = self.retrieve(feed)
        pattern = re.compile(search_term)

        results: list[Result] = []
        for item in document.channel.items:
            if pattern.search(item.title):
                results.append(Result("Title", item.title))
            if pattern.search(item.description):
                results.append(Result("Description", item.description))
        return results

    def retrieve(self, feed: Feed) -> RssDocument:
        """Download and decode the feed's RSS document."""
        if not feed.uri:
            raise ValueError("No rss feed uri provided")
        try:
            with urlopen(feed.uri) as response:
                status = response.status
                body = response.read()
        except HTTPError as err:
            with err:
                raise RuntimeError(f"HTTP Response Error {err.code}") from err
        if status != 200:
            raise RuntimeError(f"HTTP Response Error {status}")
        return parse_document(body)


register("rss", RssMatcher())