"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and {{name}}.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.
"""


@pytest.fixture(name="md")
def md_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(md):
    return md.parse(SAMPLE_MD)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
