"""Shared test fixtures: sample git output in each supported format."""

from __future__ import annotations

import textwrap

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo global structlog configuration applied by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_diff_multi() -> str:
    """A modified file, a renamed file and a binary file."""
    return textwrap.dedent("""\
        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -1,4 +1,4 @@
         import os
        -x = 1
        +x = 2
         y = 3
         z = 4
        diff --git a/old_name.py b/new_name.py
        similarity index 90%
        rename from old_name.py
        rename to new_name.py
        index abc1234..def5678 100644
        --- a/old_name.py
        +++ b/new_name.py
        @@ -5 +5,3 @@
        -value = 1
        +value = 2
        +extra = 3
        +more = 4
        diff --git a/image.png b/image.png
        new file mode 100644
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def sample_diff_new_file() -> str:
    """A diff that adds a new file."""
    return textwrap.dedent("""\
        diff --git a/hello.py b/hello.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/hello.py
        @@ -0,0 +1,3 @@
        +def greet(name):
        +    return f"Hello, {name}!"
        +
    """)


@pytest.fixture
def sample_diff_mode_only() -> str:
    """A diff with only a file mode change."""
    return textwrap.dedent("""\
        diff --git a/script.sh b/script.sh
        old mode 100644
        new mode 100755
    """)


@pytest.fixture
def sample_hunks_two() -> str:
    """A single file's hunk body with two hunks."""
    return textwrap.dedent("""\
        @@ -1,3 +1,3 @@ def main():
         a = 1
        -b = 2
        +b = 3
         c = 4
        @@ -20 +20,2 @@
         tail
        +appended
    """)


@pytest.fixture
def sample_name_status() -> str:
    """NUL-delimited --name-status -z output."""
    return "M\0src/app.py\0A\0src/new.py\0R100\0old.txt\0new.txt\0C75\0base.py\0copy.py\0D\0gone.txt\0"


@pytest.fixture
def sample_apply_summary() -> str:
    """NUL-delimited numstat rows followed by the newline-separated summary."""
    return (
        "3\t1\tsrc/app.py\0"
        "10\t0\tsrc/new.py\0"
        "0\t7\tsrc/old.py\0"
        "2\t2\tlib/b.py\0"
        "-\t-\timg.png\0"
        " create mode 100644 src/new.py\n"
        " delete mode 100644 src/old.py\n"
        " rename lib/{a.py => b.py} (80%)\n"
        " mode change 100644 => 100755 src/app.py\n"
    )
