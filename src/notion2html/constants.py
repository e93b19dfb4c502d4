#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/constants.py
"""Constants and default values shared across notion2html modules."""

from __future__ import annotations

from typing import Literal

UnsupportedBlockMode = Literal["strict", "permissive"]

UNSUPPORTED_BLOCK_MODES: list[str] = ["strict", "permissive"]

# Renderer defaults
DEFAULT_NOTION_COMPAT = False
DEFAULT_FULL_HTML = False
DEFAULT_ADD_HEADER_ANCHOR = False
DEFAULT_USE_KATEX = False
DEFAULT_KATEX_TIMEOUT = 10.0
DEFAULT_UNSUPPORTED_BLOCK_MODE: UnsupportedBlockMode = "strict"
DEFAULT_PAGE_URL_BASE = "https://www.notion.so/"

# Text substituted by the service for @user / @date mentions
INLINE_AT = "‣"

DEFAULT_PAGE_FONT = "sans"
DEFAULT_COLUMN_RATIO = 0.5
UNTITLED = "Untitled"
UNTITLED_DATABASE = "Untitled Database"

KATEX_BINARY_NAME = "katex"
KATEX_CSS_URL = "https://cdnjs.cloudflare.com/ajax/libs/KaTeX/0.10.0/katex.min.css"

# Files uploaded to the service live here; only these get a local download path
SECURE_FILE_URL_PREFIX = "https://s3-us-west-2.amazonaws.com/secure.notion-static.com/"

# Page covers served from these hosts are linked as-is
PUBLIC_COVER_URL_PREFIXES: tuple[str, ...] = (
    "https://cdn.dutchcowboys.nl/uploads",
    "https://images.unsplash.com",
    "https://www.notion.so/images/",
)
BUILTIN_COVER_PATH_PREFIX = "/images/page-cover/"
BUILTIN_COVER_HOST = "https://www.notion.so"

# Optional dependencies: (install_name, import_name, version_spec)
DEPS_JINJA = [("jinja2", "jinja2", ">=3.1.0")]

HEADER_ANCHOR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 8 8"><path d="M5.88.03c-.18.01-.36.03-.53.09-.27.1-.53'
    ".25-.75.47a.5.5 0 1 0 .69.69c.11-.11.24-.17.38-.22.35-.12.78-.07 1.06.22.39.39.39 1.04 0 1.44l-1.5 1.5c-.44.44"
    "-.8.48-1.06.47-.26-.01-.41-.13-.41-.13a.5.5 0 1 0-.5.88s.34.22.84.25c.5.03 1.2-.16 1.81-.78l1.5-1.5c.78-.78.78"
    "-2.04 0-2.81-.28-.28-.61-.45-.97-.53-.18-.04-.38-.04-.56-.03zm-2 2.31c-.5-.02-1.19.15-1.78.75l-1.5 1.5c-.78.78"
    "-.78 2.04 0 2.81.56.56 1.36.72 2.06.47.27-.1.53-.25.75-.47a.5.5 0 1 0-.69-.69c-.11.11-.24.17-.38.22-.35.12-.78"
    ".07-1.06-.22-.39-.39-.39-1.04 0-1.44l1.5-1.5c.4-.4.75-.45 1.03-.44.28.01.47.09.47.09a.5.5 0 1 0 .44-.88s-.34-.2"
    '-.84-.22z"></path></svg>'
)

DEFAULT_CSS = """
html {
    -webkit-print-color-adjust: exact;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, "Apple Color Emoji", Arial, sans-serif;
    line-height: 1.5;
    white-space: pre-wrap;
    color: rgb(55, 53, 47);
}

.page {
    max-width: 900px;
    margin: 0 auto;
    padding: 2rem;
}

.page.serif { font-family: Lyon-Text, Georgia, serif; }
.page.mono { font-family: iawriter-mono, Nitti, Menlo, Courier, monospace; }

.page-title { font-size: 2.5rem; font-weight: 700; margin-top: 0; margin-bottom: 0.75em; }

.page-cover-image {
    display: block;
    object-fit: cover;
    width: 100%;
    height: 30vh;
}

.page-header-icon { font-size: 3rem; margin-bottom: 1rem; }
.page-header-icon-with-cover { margin-top: -0.72em; margin-left: 0.07em; }
.page-header-icon img { border-radius: 3px; }

.icon {
    display: inline-block;
    max-width: 1.2em;
    max-height: 1.2em;
    text-decoration: none;
    vertical-align: text-bottom;
    margin-right: 0.5em;
}

img.icon { border-radius: 3px; }

.link-to-page { margin: 1em 0; padding: 0; border: none; font-weight: 500; }

a, a.visited { color: inherit; text-decoration: underline; }

.indented { padding-left: 1.5em; }

hr { background: transparent; display: block; width: 100%; height: 1px; border: none; border-bottom: 1px solid rgba(55, 53, 47, 0.09); }

img { max-width: 100%; }

figure { margin: 1.25em 0; page-break-inside: avoid; }
figcaption { opacity: 0.5; font-size: 85%; margin-top: 0.5em; }

mark { background-color: transparent; }

.bookmark {
    text-decoration: none;
    max-height: 8em;
    padding: 0;
    display: flex;
    width: 100%;
    align-items: stretch;
}

.bookmark-href { font-size: 0.75em; opacity: 0.5; }

code { font-family: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, Courier, monospace; }
pre { padding: 2rem; font-size: 0.85em; tab-size: 2; background: rgb(247, 246, 243); white-space: pre-wrap; }

.column-list { display: flex; justify-content: space-between; }
.column { padding: 0 1em; }
.column:first-child { padding-left: 0; }
.column:last-child { padding-right: 0; }

.table_of_contents-item { display: block; font-size: 0.875em; line-height: 1.3; padding: 0.125rem; }
.table_of_contents-indent-1 { margin-left: 1.5rem; }
.table_of_contents-indent-2 { margin-left: 3rem; }
.table_of_contents-indent-3 { margin-left: 4.5rem; }
.table_of_contents-link { text-decoration: none; opacity: 0.7; border-bottom: 1px solid rgba(55, 53, 47, 0.18); }

table, th, td { border: 1px solid rgba(55, 53, 47, 0.09); border-collapse: collapse; }
table { border-left: none; border-right: none; }
th, td { font-weight: normal; padding: 0.25em 0.5em; line-height: 1.5; min-height: 1.5em; text-align: left; }
th { color: rgba(55, 53, 47, 0.6); }

.collection-content.gallery { display: grid; grid-template-columns: repeat(auto-fill, minmax(250px, 1fr)); }
.collection-title { margin-top: 1rem; }

.selected-value {
    display: inline-block;
    padding: 0 0.5em;
    background: rgba(206, 205, 202, 0.5);
    border-radius: 3px;
    margin-right: 0.5em;
    margin-top: 0.3em;
    margin-bottom: 0.3em;
    white-space: nowrap;
}

.to-do-list { list-style-type: none; padding-left: 0; }
.to-do-children-checked { text-decoration: line-through; opacity: 0.375; }
.checkbox { display: inline-flex; vertical-align: text-bottom; width: 16px; height: 16px; background-size: 16px; margin-left: 2px; margin-right: 5px; }
.checkbox-on { background-color: rgb(46, 170, 220); }
.checkbox-off { border: 1px solid rgb(55, 53, 47); }

.toggle { padding-inline-start: 0; list-style-type: none; }
.toggle > li > details { padding-left: 1.7em; }
.toggle > li > details > summary { margin-left: -1.1em; }

.callout { border-radius: 3px; padding: 1rem; background: rgba(235, 236, 237, 0.3); }

.user { opacity: 0.5; }

.notion-header-anchor { display: inline-block; width: 1em; margin-right: 0.25em; opacity: 0.5; }

.highlight-gray { color: rgb(155, 154, 151); }
.highlight-brown { color: rgb(100, 71, 58); }
.highlight-orange { color: rgb(217, 115, 13); }
.highlight-yellow { color: rgb(223, 171, 1); }
.highlight-teal { color: rgb(15, 123, 108); }
.highlight-blue { color: rgb(11, 110, 153); }
.highlight-purple { color: rgb(105, 64, 165); }
.highlight-pink { color: rgb(173, 26, 114); }
.highlight-red { color: rgb(224, 62, 62); }
.highlight-gray_background { background: rgb(235, 236, 237); }
.highlight-brown_background { background: rgb(233, 229, 227); }
.highlight-orange_background { background: rgb(250, 235, 221); }
.highlight-yellow_background { background: rgb(251, 243, 219); }
.highlight-teal_background { background: rgb(221, 237, 234); }
.highlight-blue_background { background: rgb(221, 235, 241); }
.highlight-purple_background { background: rgb(234, 228, 242); }
.highlight-pink_background { background: rgb(244, 223, 235); }
.highlight-red_background { background: rgb(251, 228, 228); }

.block-color-gray { color: rgba(55, 53, 47, 0.6); }
.block-color-brown { color: rgb(100, 71, 58); }
.block-color-orange { color: rgb(217, 115, 13); }
.block-color-yellow { color: rgb(223, 171, 1); }
.block-color-teal { color: rgb(15, 123, 108); }
.block-color-blue { color: rgb(11, 110, 153); }
.block-color-purple { color: rgb(105, 64, 165); }
.block-color-pink { color: rgb(173, 26, 114); }
.block-color-red { color: rgb(224, 62, 62); }
.block-color-gray_background { background: rgb(235, 236, 237); }
.block-color-yellow_background { background: rgb(251, 243, 219); }
.block-color-blue_background { background: rgb(221, 235, 241); }
.block-color-red_background { background: rgb(251, 228, 228); }
"""
