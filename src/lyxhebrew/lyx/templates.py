"""Hebrew LyX document templates.

Both templates share one document header; only the body differs. The header
selects Hebrew as the document language and the Culmus families for roman,
sans and typewriter text, compiled through XeTeX (``pdf5``).
"""

from __future__ import annotations

from collections.abc import Mapping


LYX_DOCUMENT_HEADER = r"""#LyX 2.4 created this file. For more info see https://www.lyx.org/
\lyxformat 620
\begin_document
\begin_header
\save_transient_properties true
\origin unavailable
\textclass article
\begin_preamble
\newfontfamily\hebrewfont[Script=Hebrew]{David CLM}
\newfontfamily\hebrewfonttt[Script=Hebrew]{Miriam Mono CLM}
\newfontfamily\hebrewfontsf[Script=Hebrew]{Simple CLM}
\end_preamble
\use_default_options true
\maintain_unincluded_children no
\language hebrew
\language_package default
\inputencoding auto-legacy
\fontencoding auto
\font_roman "default" "David CLM"
\font_sans "default" "Simple CLM"
\font_typewriter "default" "Miriam Mono CLM"
\font_math "auto" "auto"
\font_default_family default
\use_non_tex_fonts true
\font_sc false
\font_roman_osf false
\font_sans_osf false
\font_typewriter_osf false
\font_sf_scale 100 100
\font_tt_scale 100 100
\use_microtype false
\use_dash_ligatures true
\graphics default
\default_output_format pdf5
\output_sync 0
\bibtex_command default
\index_command default
\float_placement class
\float_alignment class
\paperfontsize default
\spacing single
\use_hyperref false
\papersize default
\use_geometry false
\use_package amsmath 1
\use_package amssymb 1
\use_package cancel 1
\use_package esint 1
\use_package mathdots 1
\use_package mathtools 1
\use_package mhchem 1
\use_package stackrel 1
\use_package stmaryrd 1
\use_package undertilde 1
\cite_engine basic
\cite_engine_type default
\biblio_style plain
\use_bibtopic false
\use_indices false
\paperorientation portrait
\suppress_date false
\justification true
\use_refstyle 1
\use_formatted_ref 0
\use_minted 0
\use_lineno 0
\index Index
\shortcut idx
\color #008000
\end_index
\secnumdepth 3
\tocdepth 3
\paragraph_separation indent
\paragraph_indentation default
\is_math_indent 0
\math_numbering_side default
\quotes_style english
\dynamic_quotes 0
\papercolumns 1
\papersides 1
\paperpagestyle default
\tablestyle default
\tracking_changes false
\output_changes false
\change_bars false
\postpone_fragile_content true
\html_math_output 0
\html_css_as_file 0
\html_be_strict false
\docbook_table_output 0
\docbook_mathml_prefix 1
\end_header"""

DEFAULTS_BODY = r"""\begin_layout Standard

\end_layout
"""

ARTICLE_BODY = r"""\begin_layout Title

\end_layout

\begin_layout Author

\end_layout

\begin_layout Standard

\end_layout
"""

DEFAULTS_TEMPLATE = "defaults.lyx"
ARTICLE_TEMPLATE = "Hebrew_Article.lyx"

TEMPLATES: Mapping[str, str] = {
    DEFAULTS_TEMPLATE: DEFAULTS_BODY,
    ARTICLE_TEMPLATE: ARTICLE_BODY,
}


def render_document(body: str) -> str:
    """Wrap ``body`` layouts with the shared header into a full LyX document."""
    return f"{LYX_DOCUMENT_HEADER}\n\n\\begin_body\n\n{body}\n\\end_body\n\\end_document\n"


def render_templates() -> dict[str, str]:
    """Return every template file name mapped to its document text."""
    return {name: render_document(body) for name, body in TEMPLATES.items()}


__all__ = [
    "ARTICLE_BODY",
    "ARTICLE_TEMPLATE",
    "DEFAULTS_BODY",
    "DEFAULTS_TEMPLATE",
    "LYX_DOCUMENT_HEADER",
    "TEMPLATES",
    "render_document",
    "render_templates",
]
