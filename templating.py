# -*- coding: utf-8 -*-

"""templating.py:
Marker based templating for post pages and for the recent posts / archive HTML fragments.
Markers are literal tokens replaced with plain string substitution, there is no template language.
"""

# std libs
import re
from typing import Callable, Iterable, Mapping, Optional
# third party libs
import markdown
# this package
from data_model import Post
from date_formats import ZoneFormatter

MarkdownConverter = Callable[[str], str]
LinkResolver = Callable[[Post], Optional[str]]

# Page template markers
TITLE_MARKER = "{POST_TITLE}"
PUBLISHED_MARKER = "{POST_PUBLISHED}"
SUMMARY_MARKER = "{POST_SUMMARY}"
AUTHOR_MARKER = "{POST_AUTHOR}"
URL_MARKER = "{POST_URL}"
MODIFIED_MARKER = "{POST_MODIFIED}"
EXTERNAL_URL_MARKER = "{POST_EXTERNAL_URL}"
EXTERNAL_URL_TEXT_MARKER = "{POST_EXTERNAL_URL_TEXT}"
CONTENT_MARKER = "{POST_CONTENT}"

# Fragment markers
IMAGE_URL_MARKER = "{POST_IMAGE_URL}"
RECENT_POSTS_MARKER = "{RECENT_POSTS}"
HEADER_CONTENT_MARKER = "{POST_HEADER}"
LINK_URL_MARKER = "{POST_LINK_URL}"
LINK_TEXT_MARKER = "{POST_LINK_TEXT}"
ARCHIVE_LIST_CONTENT_MARKER = "{POSTS_ARCHIVE}"
ARCHIVE_LIST_ITEM_CONTENT_MARKER = "{ARCHIVE_ITEM}"
ARCHIVE_LIST_ITEM_LINK_MARKER = "{ARCHIVE_ITEM_LINK}"
ARCHIVE_LIST_ITEM_TEXT_MARKER = "{ARCHIVE_ITEM_TEXT}"

# CSS classes of the generated HTML, stylesheets depend on these names
RECENT_POSTS_CLASS = "recentPostsContainer"
HEADER_CLASS = "postHeader"
POST_LINK_CLASS = "postLink"
ARCHIVE_LIST_CLASS = "blogPostArchive"
ARCHIVE_LIST_ITEM_CLASS = "blogPostArchiveItem"
ARCHIVE_LIST_ITEM_LINK_CLASS = "blogPostArchiveItemLink"

# HTML tags for the fragments
POST_IMAGE_TAG = f"<img src='{IMAGE_URL_MARKER}'>"
RECENT_POSTS_TAG = f"<div class='{RECENT_POSTS_CLASS}'>{RECENT_POSTS_MARKER}</div>"
HEADER_TAG = f"<h3 class='{HEADER_CLASS}'>{HEADER_CONTENT_MARKER}</h3>"
POST_LINK_TAG = f"<a class='{POST_LINK_CLASS}' href='{LINK_URL_MARKER}'>{LINK_TEXT_MARKER}</a>"
ARCHIVE_LIST_TAG = f"<ul class='{ARCHIVE_LIST_CLASS}'>\n{ARCHIVE_LIST_CONTENT_MARKER}\n</ul>"
ARCHIVE_LIST_ITEM_TAG = f"<li class='{ARCHIVE_LIST_ITEM_CLASS}'>{ARCHIVE_LIST_ITEM_CONTENT_MARKER}</li>\n"
ARCHIVE_LIST_ITEM_LINK_TAG = (f"<a class='{ARCHIVE_LIST_ITEM_LINK_CLASS}' href='{ARCHIVE_LIST_ITEM_LINK_MARKER}'>"
                              f"{ARCHIVE_LIST_ITEM_TEXT_MARKER}</a>")


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text)


def replace_markers(template: str, replacements: Mapping[str, str]) -> str:
    """
    Replaces every literal occurrence of each marker with its text.
    The template is scanned once, so inserted text is never searched for markers.
    """
    if not replacements:
        return template
    markers = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(marker) for marker in markers))
    return pattern.sub(lambda m: replacements[m.group(0)], template)


def render_body(post: Post, converter: MarkdownConverter = markdown_to_html) -> str:
    """The post body as HTML, empty if the post has no body."""
    if post.body is None:
        return ""
    if post.is_html:
        return post.body
    return converter(post.body)


def render_post_page(post: Post,
                     template: Optional[str],
                     formatter: Optional[ZoneFormatter] = None,
                     converter: MarkdownConverter = markdown_to_html) -> str:
    """
    Inserts the post into the given page template.
    Every page marker is replaced, absent values become empty strings.
    When the post has an image its tag is inserted right before the content marker,
    and the content marker then receives the rendered body on its own.
    """
    formatter = formatter or ZoneFormatter()
    html = template or ""

    if post.image is not None:
        image_tag = POST_IMAGE_TAG.replace(IMAGE_URL_MARKER, post.image)
        html = html.replace(CONTENT_MARKER, image_tag + CONTENT_MARKER)

    author_name = post.author.name if post.author is not None else None
    modified = formatter.filename(post.modified) if post.modified is not None else ""
    return replace_markers(html, {
        TITLE_MARKER: post.display_title(formatter),
        PUBLISHED_MARKER: formatter.display(post.published),
        SUMMARY_MARKER: post.summary or "",
        AUTHOR_MARKER: author_name or "",
        URL_MARKER: post.url or "",
        MODIFIED_MARKER: modified,
        EXTERNAL_URL_MARKER: post.external_url or "",
        EXTERNAL_URL_TEXT_MARKER: post.external_url_text or "",
        CONTENT_MARKER: render_body(post, converter),
    })


def post_content(post: Post,
                 link: Optional[str],
                 formatter: Optional[ZoneFormatter] = None,
                 converter: MarkdownConverter = markdown_to_html) -> str:
    """
    HTML for one post inside a list of posts: a linked header followed by the body.
    Titled posts link the title and show the date after the link,
    untitled posts link the date. Without a link the header is left out.
    """
    formatter = formatter or ZoneFormatter()
    header = ""
    if link is not None:
        published = formatter.display(post.published)
        if post.title is not None:
            link_text = post.title
            header_suffix = " " + published
        else:
            link_text = published
            header_suffix = ""
        header_content = replace_markers(POST_LINK_TAG, {
            LINK_URL_MARKER: link,
            LINK_TEXT_MARKER: link_text,
        }) + header_suffix
        header = HEADER_TAG.replace(HEADER_CONTENT_MARKER, header_content)
    return header + render_body(post, converter)


def container_html(posts: Iterable[Post],
                   link_for: LinkResolver,
                   formatter: Optional[ZoneFormatter] = None,
                   converter: MarkdownConverter = markdown_to_html) -> str:
    """A recent posts section holding the content of every given post, in order."""
    content = "".join(post_content(post, link_for(post), formatter, converter) for post in posts)
    return RECENT_POSTS_TAG.replace(RECENT_POSTS_MARKER, content)


def archive_html(posts: Iterable[Post],
                 link_for: LinkResolver,
                 formatter: Optional[ZoneFormatter] = None) -> str:
    """An archive list linking every given post, posts without a link are left out."""
    formatter = formatter or ZoneFormatter()
    items = []
    for post in posts:
        link = link_for(post)
        if link is None:
            continue
        archive_link = replace_markers(ARCHIVE_LIST_ITEM_LINK_TAG, {
            ARCHIVE_LIST_ITEM_LINK_MARKER: link,
            ARCHIVE_LIST_ITEM_TEXT_MARKER: post.display_title(formatter),
        })
        items.append(ARCHIVE_LIST_ITEM_TAG.replace(ARCHIVE_LIST_ITEM_CONTENT_MARKER, archive_link))
    return ARCHIVE_LIST_TAG.replace(ARCHIVE_LIST_CONTENT_MARKER, "".join(items))
