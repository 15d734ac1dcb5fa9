"""The fixed catalog of questions asked by ``webstarter new``.

Modules are listed in the order the pipeline prompts them.  ``PHP`` is only
asked when the user opted into ``PHP_DIRS``.
"""

from __future__ import annotations

from webstarter.models import Choice, FileEntry, Module
from webstarter.templates import load_template

BOOTSTRAP_CSS_URL = (
    "https://cdn.jsdelivr.net/npm/bootstrap@5.3.0-alpha1/dist/css/bootstrap.min.css"
)
BOOTSTRAP_JS_URL = (
    "https://cdn.jsdelivr.net/npm/bootstrap@5.3.0-alpha1/dist/js/bootstrap.bundle.min.js"
)
TAILWIND_URL = "https://cdn.tailwindcss.com"

_PHP_DIRECTORIES = ("src", "config")


PHP_DIRS = Module(
    prompt="Use php",
    default_label="No",
    choices=(
        Choice(
            prompt="Yes",
            directories=("public", *_PHP_DIRECTORIES),
            override_public_subdir="public",
        ),
    ),
)

PHP = Module(
    prompt="Php boilerplate",
    choices=(
        Choice(
            prompt="Database",
            directories=_PHP_DIRECTORIES,
            files=(
                FileEntry(payload=load_template("db.php"), destination="src/db.php"),
                FileEntry(payload=load_template("db_conf.php"), destination="config/db.php"),
            ),
        ),
        Choice(
            prompt="Jwt",
            directories=_PHP_DIRECTORIES,
            files=(
                FileEntry(payload=load_template("jwt.php"), destination="src/jwt.php"),
                FileEntry(payload=load_template("jwt_conf.php"), destination="config/jwt.php"),
            ),
        ),
    ),
)

CSS = Module(
    prompt="Create css file",
    default_label="No",
    choices=(
        Choice(
            prompt="style.css",
            files=(FileEntry(payload=load_template("style.css"), destination="style.css"),),
            uses_project_root=False,
            snippet='\t<link rel="stylesheet" href="style.css">\n',
        ),
        Choice(
            prompt="style.scss",
            files=(FileEntry(payload=load_template("style.css"), destination="style.scss"),),
            uses_project_root=False,
            snippet='\t<link rel="stylesheet" href="style.scss">\n',
        ),
    ),
)

CSS_FRAMEWORK = Module(
    prompt="Use css framework",
    choices=(
        Choice(
            prompt="Bootstrap",
            directories=("framework",),
            files=(
                FileEntry(
                    payload=BOOTSTRAP_CSS_URL,
                    destination="framework/bootstrap.min.css",
                    remote=True,
                ),
                FileEntry(
                    payload=BOOTSTRAP_JS_URL,
                    destination="framework/bootstrap.bundle.min.js",
                    remote=True,
                ),
            ),
            uses_project_root=False,
            snippet=load_template("bootstrap.html"),
        ),
        Choice(
            prompt="Tailwind",
            directories=("framework",),
            files=(
                FileEntry(
                    payload=TAILWIND_URL,
                    destination="framework/tailwindcss.js",
                    remote=True,
                ),
            ),
            uses_project_root=False,
            snippet=load_template("tailwind.html"),
        ),
    ),
)

MODULES: tuple[Module, ...] = (PHP_DIRS, PHP, CSS, CSS_FRAMEWORK)
