"""Common literal values used across module_pages.

These constants keep URL scope markers and metadata keys centralized so hooks,
templates, and tests can import the same values without drifting. Intended for
internal use within the module_pages package.

Examples
--------
>>> from module_pages import _constants
>>> _constants.MODULES_MARKER in "/modules/foo/"
True
>>> _constants.BREADCRUMB_PATHS_KEY
'breadcrumb_paths'
"""

MODULES_MARKER = "/modules/"
POWERSHELL_MODULES_MARKER = "/powershellmodules/"
POWERSHELL_MODULES_TITLE = "PowerShell Modules"

INDEX_SEGMENT = "index.html"
COMMANDS_SEGMENT = "commands"
ROOT_PATH = "/"

BREADCRUMB_PATHS_KEY = "breadcrumb_paths"
BREADCRUMB_TITLE_KEY = "breadcrumb_title"
MODULE_NAME_KEY = "module_name"
COMMAND_SECTION_KEY = "command_section"
