"""Shared fixtures for core unit tests"""

from datetime import datetime

import pytest

from mhcms.core.content import ArticleContent


SAMPLE_ARTICLE = """\
Title: Hello World
Sub-Title: A first post
Tags: python, parsing, ,markdown
Authors: Ada, Linus
Cover_Image: cover.png
Reading-Time: 5
---

Intro paragraph
spanning two lines.

# Getting started

Some text.

```{yaml @parse name=config}
debug: true
level: 3
```

## Details

> Simple is better than complex.
> - Tim Peters

# Code

```python
# not a heading
print("hi")

```
"""


@pytest.fixture(name="sample_text")
def sample_text_fixture():
    return SAMPLE_ARTICLE


@pytest.fixture(name="sample_date")
def sample_date_fixture():
    return datetime(2024, 5, 1)


@pytest.fixture(name="sample_body")
def sample_body_fixture():
    """The sample article's body as a depth-0 content node."""
    return ArticleContent(SAMPLE_ARTICLE.split("\n---\n", 1)[1].split("\n"))
