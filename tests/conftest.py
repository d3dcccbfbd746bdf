"""Shared fixtures: a small docs content tree and a posts dataset on disk"""

import json

import pytest


INDEX_MD = """\
---
title: "Introduction"
description: "Start here"
---

Welcome. See [getting started](/getting-started).
"""

GETTING_STARTED_MD = """\
---
title: "Getting Started"
description: "Install and run"
---

<Note>
  Requires an account.
</Note>

Read [how it works](/how-it-works) or [the FAQ](/docs/help/faq).
"""

FEATURES_INDEX_MD = """\
---
title: "Features"
---

<CardGroup cols={2}>
<Card title="Channels" href="/features/channels">Chat everywhere</Card>
<Card title="Skills" href="/features/skills">Extend the agent</Card>
</CardGroup>
"""

POSTS = {
    "hello-world": {
        "slug": "hello-world",
        "title": "Hello World",
        "excerpt": "First post",
        "date": "2026-01-15",
        "readTime": "3 min read",
        "category": "News",
        "content": "## Why\n\nBecause.\n\n- one\n- two\n\n```\nprint('hi')\n```",
    },
}


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path):
    """Docs tree with an index, one direct file, and one directory index."""
    root = tmp_path / "content" / "docs"
    (root / "features").mkdir(parents=True)
    (root / "index.md").write_text(INDEX_MD, encoding="utf-8")
    (root / "getting-started.md").write_text(GETTING_STARTED_MD, encoding="utf-8")
    (root / "features" / "index.md").write_text(FEATURES_INDEX_MD, encoding="utf-8")
    return root


@pytest.fixture(name="posts_file")
def posts_file_fixture(tmp_path):
    path = tmp_path / "content" / "blog" / "posts.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(POSTS), encoding="utf-8")
    return path
