"""Static icon glyphs and the file icon/color lookup table.

Glyphs come from Nerd Fonts. Lookup tries the full lowercased file name
first (``Makefile``, ``Dockerfile``), then the lowercased extension.
"""

from __future__ import annotations

from typing import NamedTuple

ICON_FOLDER_CLOSED = "\ue5ff"
ICON_FOLDER_OPEN = "\ue5fe"
ICON_FOLDER_SYMLINK = "\uf482"
ICON_FILE_DEFAULT = "\ue612"
ICON_FILE_SYMLINK = "\uf481"
DEFAULT_ICON_COLOR = "#999999"


class IconDef(NamedTuple):
    icon: str
    color: str


ICON_TABLE: dict[str, IconDef] = {
    # C/C++
    "c": IconDef("\ue61e", "#599EFF"),
    "cpp": IconDef("\ue61d", "#519ABA"),
    "cc": IconDef("\ue61d", "#F34B7D"),
    "cxx": IconDef("\ue61d", "#519ABA"),
    "h": IconDef("\uf0fd", "#A074C4"),
    "hpp": IconDef("\uf0fd", "#A074C4"),
    "hxx": IconDef("\uf0fd", "#A074C4"),
    "hh": IconDef("\uf0fd", "#A074C4"),
    # Rust
    "rs": IconDef("\ue68b", "#DEA584"),
    # Python
    "py": IconDef("\ue606", "#FFBC03"),
    "pyi": IconDef("\ue606", "#FFBC03"),
    "pyc": IconDef("\ue606", "#FFE873"),
    "pyw": IconDef("\ue606", "#FFBC03"),
    # Lua
    "lua": IconDef("\ue620", "#51A0CF"),
    "luau": IconDef("\ue620", "#00A2FF"),
    # JavaScript/TypeScript
    "js": IconDef("\ue60c", "#CBCB41"),
    "mjs": IconDef("\ue60c", "#F1E05A"),
    "cjs": IconDef("\ue60c", "#CBCB41"),
    "ts": IconDef("\ue628", "#519ABA"),
    "mts": IconDef("\ue628", "#519ABA"),
    "cts": IconDef("\ue628", "#519ABA"),
    "jsx": IconDef("\ue625", "#20C2E3"),
    "tsx": IconDef("\ue7ba", "#1354BF"),
    "d.ts": IconDef("\ue628", "#D59855"),
    # Web
    "html": IconDef("\ue736", "#E44D26"),
    "htm": IconDef("\ue60e", "#E34C26"),
    "css": IconDef("\ue6b8", "#663399"),
    "scss": IconDef("\ue603", "#F55385"),
    "sass": IconDef("\ue603", "#F55385"),
    "less": IconDef("\ue614", "#563D7C"),
    "vue": IconDef("\ue6a0", "#8DC149"),
    "svelte": IconDef("\ue697", "#FF3E00"),
    "astro": IconDef("\ue6b3", "#E23F67"),
    # Data formats
    "json": IconDef("\ue60b", "#CBCB41"),
    "jsonc": IconDef("\ue60b", "#CBCB41"),
    "json5": IconDef("\ue60b", "#CBCB41"),
    "yaml": IconDef("\ue615", "#6D8086"),
    "yml": IconDef("\ue615", "#6D8086"),
    "toml": IconDef("\ue6b2", "#9C4221"),
    "xml": IconDef("\U000f05c0", "#E37933"),
    "csv": IconDef("\ue64a", "#89E051"),
    # Shell
    "sh": IconDef("\ue795", "#4D5A5E"),
    "bash": IconDef("\ue760", "#89E051"),
    "zsh": IconDef("\ue795", "#89E051"),
    "fish": IconDef("\ue795", "#4D5A5E"),
    "ps1": IconDef("\ue615", "#012456"),
    "bat": IconDef("\ue615", "#C1F12E"),
    "cmd": IconDef("\ue615", "#C1F12E"),
    "awk": IconDef("\ue795", "#4D5A5E"),
    # Go
    "go": IconDef("\ue627", "#00ADD8"),
    "mod": IconDef("\ue627", "#00ADD8"),
    "sum": IconDef("\ue627", "#00ADD8"),
    # Java/JVM
    "java": IconDef("\ue738", "#CC3E44"),
    "jar": IconDef("\ue738", "#CC3E44"),
    "class": IconDef("\ue738", "#CC3E44"),
    "kt": IconDef("\ue634", "#7F52FF"),
    "kts": IconDef("\ue634", "#7F52FF"),
    "scala": IconDef("\ue637", "#CC3E44"),
    "groovy": IconDef("\ue637", "#4298B8"),
    "gradle": IconDef("\ue660", "#005F87"),
    # .NET
    "cs": IconDef("\U000f031b", "#596706"),
    "csx": IconDef("\U000f031b", "#596706"),
    "fs": IconDef("\ue7a7", "#519ABA"),
    "fsx": IconDef("\ue7a7", "#519ABA"),
    "vb": IconDef("\ue617", "#945DB7"),
    "sln": IconDef("\ue617", "#854CC7"),
    "csproj": IconDef("\U000f0aae", "#512BD4"),
    # Ruby
    "rb": IconDef("\ue791", "#701516"),
    "erb": IconDef("\ue60e", "#701516"),
    "rake": IconDef("\ue791", "#701516"),
    "gemspec": IconDef("\ue791", "#701516"),
    # PHP
    "php": IconDef("\ue608", "#A074C4"),
    "phtml": IconDef("\ue608", "#A074C4"),
    # Swift/Apple
    "swift": IconDef("\ue755", "#E37933"),
    "m": IconDef("\ue61e", "#599EFF"),
    "mm": IconDef("\ue61d", "#519ABA"),
    # Zig/Nim
    "zig": IconDef("\ue6a9", "#F69A1B"),
    "nim": IconDef("\ue677", "#F3D400"),
    # Functional
    "hs": IconDef("\ue61f", "#A074C4"),
    "lhs": IconDef("\ue61f", "#A074C4"),
    "ml": IconDef("\ue67a", "#E37933"),
    "mli": IconDef("\ue67a", "#E37933"),
    "ex": IconDef("\ue62d", "#A074C4"),
    "exs": IconDef("\ue62d", "#A074C4"),
    "erl": IconDef("\ue7b1", "#B83998"),
    "hrl": IconDef("\ue7b1", "#B83998"),
    "clj": IconDef("\ue768", "#8DC149"),
    "cljs": IconDef("\ue76a", "#519ABA"),
    "cljc": IconDef("\ue768", "#8DC149"),
    "el": IconDef("\ue632", "#8172BE"),
    "elm": IconDef("\ue62c", "#519ABA"),
    # Data science
    "r": IconDef("\U000f07d4", "#2266BA"),
    "rmd": IconDef("\U000f07d4", "#2266BA"),
    "jl": IconDef("\ue624", "#A270BA"),
    "ipynb": IconDef("\ue80f", "#F57D01"),
    # Mobile
    "dart": IconDef("\ue798", "#03589C"),
    # Database
    "sql": IconDef("\ue706", "#DAD8D8"),
    "sqlite": IconDef("\ue706", "#DAD8D8"),
    "db": IconDef("\ue706", "#DAD8D8"),
    "graphql": IconDef("\uf20e", "#E535AB"),
    "gql": IconDef("\uf20e", "#E535AB"),
    "prisma": IconDef("\ue60b", "#0C344B"),
    # DevOps/Config
    "dockerfile": IconDef("\U000f0868", "#458EE6"),
    "dockerignore": IconDef("\U000f0868", "#458EE6"),
    "nix": IconDef("\uf313", "#7EBAE4"),
    "tf": IconDef("\ue617", "#5C4EE5"),
    "tfvars": IconDef("\ue617", "#5C4EE5"),
    "hcl": IconDef("\ue617", "#5C4EE5"),
    # Build/Make
    "makefile": IconDef("\ue779", "#6D8086"),
    "gnumakefile": IconDef("\ue779", "#6D8086"),
    "cmake": IconDef("\ue794", "#DCE3EB"),
    "meson": IconDef("\ue617", "#6D8086"),
    # Docs
    "md": IconDef("\uf48a", "#DDDDDD"),
    "markdown": IconDef("\ue609", "#DDDDDD"),
    "mdx": IconDef("\uf48a", "#519ABA"),
    "rst": IconDef("\uf48a", "#DDDDDD"),
    "txt": IconDef("\uf15c", "#89E051"),
    "org": IconDef("\ue633", "#77AA99"),
    "tex": IconDef("\ue617", "#3D6117"),
    "bib": IconDef("\U000f125f", "#CBCB41"),
    # Git
    "git": IconDef("\ue702", "#F14C28"),
    "gitignore": IconDef("\ue702", "#F14C28"),
    "gitmodules": IconDef("\ue702", "#F14C28"),
    "gitattributes": IconDef("\ue702", "#F14C28"),
    # Editor
    "vim": IconDef("\ue62b", "#019833"),
    "nvim": IconDef("\ue62b", "#019833"),
    "vimrc": IconDef("\ue62b", "#019833"),
    "editorconfig": IconDef("\ue60b", "#FFFFFF"),
    # Archives
    "zip": IconDef("\uf410", "#ECA517"),
    "tar": IconDef("\uf410", "#ECA517"),
    "gz": IconDef("\uf410", "#ECA517"),
    "xz": IconDef("\uf410", "#ECA517"),
    "bz2": IconDef("\uf410", "#ECA517"),
    "7z": IconDef("\uf410", "#ECA517"),
    "rar": IconDef("\uf410", "#ECA517"),
    "deb": IconDef("\uf410", "#A80030"),
    "rpm": IconDef("\uf410", "#EE0000"),
    # Images
    "png": IconDef("\ue60d", "#A074C4"),
    "jpg": IconDef("\ue60d", "#A074C4"),
    "jpeg": IconDef("\ue60d", "#A074C4"),
    "gif": IconDef("\ue60d", "#A074C4"),
    "bmp": IconDef("\ue60d", "#A074C4"),
    "ico": IconDef("\ue60d", "#CBCB41"),
    "webp": IconDef("\ue60d", "#A074C4"),
    "svg": IconDef("\uf1b2", "#FFB13B"),
    "avif": IconDef("\ue60d", "#A074C4"),
    # Audio/Video
    "mp3": IconDef("\uf001", "#00AFFF"),
    "wav": IconDef("\uf001", "#00AFFF"),
    "flac": IconDef("\uf001", "#0075AA"),
    "ogg": IconDef("\uf001", "#0075AA"),
    "aac": IconDef("\uf001", "#00AFFF"),
    "mp4": IconDef("\ue69f", "#FD971F"),
    "mkv": IconDef("\ue69f", "#FD971F"),
    "avi": IconDef("\ue69f", "#FD971F"),
    "mov": IconDef("\ue69f", "#FD971F"),
    "webm": IconDef("\ue69f", "#FD971F"),
    # Fonts
    "ttf": IconDef("\uf031", "#ECECEC"),
    "otf": IconDef("\uf031", "#ECECEC"),
    "woff": IconDef("\uf031", "#ECECEC"),
    "woff2": IconDef("\uf031", "#ECECEC"),
    # Documents
    "pdf": IconDef("\ue607", "#B30B00"),
    "doc": IconDef("\U000f022c", "#185ABD"),
    "docx": IconDef("\U000f022c", "#185ABD"),
    "xls": IconDef("\uf378", "#207245"),
    "xlsx": IconDef("\uf378", "#207245"),
    "ppt": IconDef("\uf37a", "#CB4A32"),
    "pptx": IconDef("\uf37a", "#CB4A32"),
    "odt": IconDef("\uf37c", "#2DCBFD"),
    "ods": IconDef("\uf378", "#78FC4E"),
    "odp": IconDef("\uf37a", "#FE9C45"),
    # Misc
    "lock": IconDef("\ue672", "#BBBBBB"),
    "log": IconDef("\U000f0331", "#DDDDDD"),
    "env": IconDef("\uf462", "#FAF743"),
    "conf": IconDef("\ue615", "#6D8086"),
    "cfg": IconDef("\ue615", "#6D8086"),
    "ini": IconDef("\ue615", "#6D8086"),
    "license": IconDef("\ue60a", "#CBCB41"),
    "readme": IconDef("\uf48a", "#DDDDDD"),
    # Additional common
    "asm": IconDef("\ue637", "#0091BD"),
    "s": IconDef("\ue637", "#0091BD"),
    "cr": IconDef("\ue62f", "#C8C8C8"),
    "coffee": IconDef("\ue61b", "#CBCB41"),
    "diff": IconDef("\ue728", "#41535B"),
    "patch": IconDef("\ue728", "#41535B"),
    "d": IconDef("\ue7af", "#B03931"),
    "ada": IconDef("\ue6b5", "#599EFF"),
    "adb": IconDef("\ue6b5", "#599EFF"),
    "ads": IconDef("\ue6b5", "#A074C4"),
    "hbs": IconDef("\ue60f", "#F0772B"),
    "mustache": IconDef("\ue60f", "#E37933"),
    "ejs": IconDef("\ue60e", "#CBCB41"),
    "haml": IconDef("\ue60e", "#EAEAE1"),
    "pug": IconDef("\ue60e", "#A86454"),
    "hx": IconDef("\ue666", "#EA8220"),
    "gleam": IconDef("\uf005", "#FFAFF3"),
    "odin": IconDef("\U000f07e2", "#3882D2"),
    "v": IconDef("\ue617", "#5D87BF"),
    "vert": IconDef("\ue855", "#5586A6"),
    "frag": IconDef("\ue855", "#5586A6"),
    "glsl": IconDef("\ue855", "#5586A6"),
    "wgsl": IconDef("\ue855", "#5586A6"),
    "cu": IconDef("\ue64b", "#89E051"),
    "cuh": IconDef("\ue64b", "#A074C4"),
}


def _lookup(name: str) -> IconDef | None:
    lower_name = name.lower()
    found = ICON_TABLE.get(lower_name)
    if found is not None:
        return found
    dot = lower_name.rfind(".")
    if dot < 0:
        return None
    return ICON_TABLE.get(lower_name[dot + 1 :])


def file_icon_for(name: str, is_symlink: bool = False) -> str:
    """Return the glyph for a file named ``name``."""
    if is_symlink:
        return ICON_FILE_SYMLINK
    found = _lookup(name)
    return found.icon if found is not None else ICON_FILE_DEFAULT


def file_icon_color(name: str) -> str:
    """Return the ``#rrggbb`` icon color for a file named ``name``."""
    found = _lookup(name)
    return found.color if found is not None else DEFAULT_ICON_COLOR


def folder_icon(expanded: bool) -> str:
    return ICON_FOLDER_OPEN if expanded else ICON_FOLDER_CLOSED
