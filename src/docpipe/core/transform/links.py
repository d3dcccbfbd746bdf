"""Internal link normalization for the mounted /docs prefix"""

import re


# ](/path) where path does not already start with docs/
ROOT_LINK_RE = re.compile(r'\]\(/((?!docs/)[^)]*)\)')


def normalize_links(body: str) -> str:
    """Rewrite root-relative markdown link targets to live under /docs/.

    Absolute URLs and targets already under /docs/ are not matched, so a
    second pass is a no-op.
    """
    return ROOT_LINK_RE.sub(r'](/docs/\1)', body)
