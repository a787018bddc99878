import os
from itertools import islice

import pytest

from fileops.utils.naming import candidate_names, first_free_path, split_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("data.txt", ("data", ".txt")),
        ("archive.tar.gz", ("archive.tar", ".gz")),
        ("README", ("README", "")),
        (".bashrc", (".bashrc", "")),
        ("trailing.", ("trailing", ".")),
    ],
)
def test_split_name_uses_last_dot(name, expected):
    assert split_name(name) == expected


def test_candidate_names_sequence():
    assert list(islice(candidate_names("report.pdf"), 4)) == [
        "report.pdf",
        "report_1.pdf",
        "report_2.pdf",
        "report_3.pdf",
    ]


def test_candidate_names_for_dotless_and_hidden_files():
    assert list(islice(candidate_names("Makefile"), 2)) == ["Makefile", "Makefile_1"]
    assert list(islice(candidate_names(".env"), 2)) == [".env", ".env_1"]


def test_first_free_path_skips_taken_names(tmp_path):
    for name in ("a.txt", "a_1.txt", "a_3.txt"):
        (tmp_path / name).write_text("")

    assert first_free_path(str(tmp_path), "a.txt") == os.path.join(tmp_path, "a_2.txt")


def test_first_free_path_in_empty_directory(tmp_path):
    assert first_free_path(str(tmp_path), "a.txt") == os.path.join(tmp_path, "a.txt")
