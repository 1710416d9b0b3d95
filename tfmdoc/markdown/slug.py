"""Heading title to anchor slug conversion."""

# Characters removed from titles before spaces become hyphens
DROPPED_CHARS = (
    '"', "'", "`", ".",
    "!", ",", "~", "&",
    "%", "^", "*", "#",
    "@", "|",
    "(", ")",
    "{", "}",
    "[", "]",
)  # fmt: skip

_DROP_TABLE = str.maketrans("", "", "".join(DROPPED_CHARS))


def slugify(title: str) -> str:
    """
    Convert a heading title into an anchor fragment.

    Lower-cases, drops DROPPED_CHARS and turns every space into a hyphen.
    Nothing else is normalized: leading, trailing and repeated hyphens are
    kept so anchors match what existing Markdown renderers link to.

    Example:
        >>> slugify("Inputs & Outputs (v2)")
        'inputs--outputs-v2'
    """
    return title.lower().translate(_DROP_TABLE).replace(" ", "-")
