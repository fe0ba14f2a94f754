"""Inline PHP run through ``php -r`` to read values out of settings.php.

Paths from ``drush status`` are pasted into the code as-is, so the site
root must come from a trusted location.
"""

from drushkit.domain.site_info import Status

SETTINGS_EXPR = "$settings"
DEFAULT_DATABASE_EXPR = "$databases['default']['default']"


def _bootstrap(status: Status) -> str:
    return (
        "$app_root = '" + status.root + "'; "
        "$site_path = '" + status.site + "'; "
        "include_once($app_root.'/'.$site_path.'/settings.php'); "
    )


def dump_snippet(status: Status, expr: str) -> str:
    return _bootstrap(status) + "print json_encode(" + expr + ");"


def settings_snippet(status: Status) -> str:
    return dump_snippet(status, SETTINGS_EXPR)


def database_snippet(status: Status) -> str:
    return dump_snippet(status, DEFAULT_DATABASE_EXPR)
