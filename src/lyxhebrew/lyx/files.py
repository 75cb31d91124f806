"""LyX preference and key binding files written by the installer.

Both files use LyX's own plain-text syntax and are written verbatim.
"""

from __future__ import annotations


PREFERENCES = r"""Format 38

# Bind file - load user.bind which includes Mac base bindings + Hebrew shortcuts
\bind_file "user"

#
# MISC SECTION ######################################
#

\path_prefix "/Library/TeX/texbin:/usr/texbin:/opt/homebrew/bin:/opt/local/bin:/usr/local/bin:/usr/bin:/usr/sbin:/sbin"
\serverpipe "~/Library/Application Support/LyX-2.4/.lyxpipe"

#
# SCREEN & FONTS SECTION ############################
#

# Screen fonts - David CLM for Hebrew display in LyX GUI
\screen_font_roman "David CLM"
\screen_font_sans "Simple CLM"
\screen_font_typewriter "Miriam Mono CLM"

\open_buffers_in_tabs false
\mac_like_cursor_movement true

# Instant preview: No math (don't render math as preview images)
\preview no_math

# Scroll wheel zoom with Ctrl (Madlyx guide, page 15)
\scroll_wheel_zoom "ctrl"

#
# EDITING SECTION ###################################
#

# Cursor movement: Visual (Madlyx guide, page 15)
\visual_cursor true

# Cursor follows scrollbar
\cursor_follows_scrollbar true

# Scroll below document end
\scroll_below_document true

# Sort environments alphabetically (Madlyx guide, page 16)
\sort_layouts true

# Group environments by category
\group_layouts true

#
# LANGUAGE SUPPORT SECTION ##########################
#

# Language package: Automatic (Madlyx guide, page 15)
\language_package_selection 0

# Set language globally (Madlyx guide, page 15)
\language_global_options true

# Auto begin (Madlyx guide, page 15)
\language_auto_begin true

# Auto end (Madlyx guide, page 15)
\language_auto_end true

# Mark foreign language (Madlyx guide, page 15)
\mark_foreign_language true

# Language command
\language_command_begin "\selectlanguage{$$lang}"

# Do not follow OS keyboard - use F12 to toggle inside LyX
\respect_os_kbd_language false

#
# KEYBOARD SECTION ##################################
#

# Use keyboard map (Madlyx guide, page 15)
\kbmap true

# Primary: null (Madlyx guide, page 15)
\kbmap_primary ""

# Secondary: hebrew (Madlyx guide, page 15)
\kbmap_secondary "hebrew"

#
# TEMPLATE SECTION ##################################
#

\template_path "~/Library/Application Support/LyX-2.4/templates"

# Default output format for non-TeX font documents (XeTeX PDF)
\default_otf_view_format "pdf5"

#
# SPELLCHECKER SECTION ##############################
#

\spellchecker "native"
"""

USER_BIND = r"""## user.bind
## Configured per the Madlyx guide (by Kali)
## Mac-adapted: uses "mac" base bindings

Format 5

# Include Mac default bindings as base
\bind_file "mac"

# F12 toggles Hebrew language (Madlyx guide, page 16)
# IMPORTANT: Keep OS keyboard on English at all times.
# Use F12 to switch between Hebrew and English *within LyX*.
# Never use Alt+Shift to switch language.
\bind "F12"                    "language hebrew"
\bind "S-F12"                  "language english"
"""


__all__ = ["PREFERENCES", "USER_BIND"]
