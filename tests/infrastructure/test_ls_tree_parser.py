import pytest

from git_pub.domain.models import EntryType, TreeEntry
from git_pub.infrastructure.git_cli_reader import _parse_ls_tree, _parse_tag_lines

BLOB_ID = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"
TREE_ID = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


class TestParseLsTree:
    def test_single_record(self):
        output = f"100644 blob {BLOB_ID}\tREADME\0".encode()
        assert _parse_ls_tree(output) == [
            TreeEntry(mode="100644", type=EntryType.blob, object_id=BLOB_ID, name="README")
        ]

    def test_trailing_nul_adds_no_entry(self):
        output = (
            f"040000 tree {TREE_ID}\tdocs\0"
            f"100644 blob {BLOB_ID}\tREADME\0"
        ).encode()
        result = _parse_ls_tree(output)
        assert len(result) == 2
        assert result[0].type is EntryType.tree
        assert result[0].name == "docs"

    def test_missing_final_nul(self):
        output = f"100644 blob {BLOB_ID}\tREADME".encode()
        assert [e.name for e in _parse_ls_tree(output)] == ["README"]

    def test_empty_output(self):
        assert _parse_ls_tree(b"") == []

    def test_splits_on_first_tab_only(self):
        output = f"100644 blob {BLOB_ID}\tname\twith\ttabs\0".encode()
        assert _parse_ls_tree(output)[0].name == "name\twith\ttabs"

    def test_newline_in_name_kept(self):
        output = f"100644 blob {BLOB_ID}\tline\nbreak\0".encode()
        assert _parse_ls_tree(output)[0].name == "line\nbreak"

    def test_unknown_type_becomes_other(self):
        output = f"160000 commit {BLOB_ID}\tvendor/lib\0".encode()
        entry = _parse_ls_tree(output)[0]
        assert entry.type is EntryType.other
        assert entry.mode == "160000"

    def test_malformed_records_skipped(self):
        output = (
            b"garbage without tab\0"
            b"100644 blob\tshort\0"
            + f"100755 blob {BLOB_ID}\trun.sh\0".encode()
        )
        result = _parse_ls_tree(output)
        assert [e.name for e in result] == ["run.sh"]
        assert result[0].mode == "100755"

    def test_preserves_git_order(self):
        output = (
            f"100644 blob {BLOB_ID}\tb\0"
            f"100644 blob {BLOB_ID}\ta\0"
        ).encode()
        assert [e.name for e in _parse_ls_tree(output)] == ["b", "a"]

    def test_utf8_name(self):
        output = f"100644 blob {BLOB_ID}\tnaïve.txt\0".encode()
        assert _parse_ls_tree(output)[0].name == "naïve.txt"


class TestParseTagLines:
    def test_one_tag_per_line(self):
        assert _parse_tag_lines(b"v1.0\nv2.0\n") == ["v1.0", "v2.0"]

    def test_blank_lines_dropped(self):
        assert _parse_tag_lines(b"v1.0\n\nv2.0") == ["v1.0", "v2.0"]

    def test_empty(self):
        assert _parse_tag_lines(b"") == []

    def test_crlf_line_endings(self):
        assert _parse_tag_lines(b"v1.0\r\nv2.0\r\n") == ["v1.0", "v2.0"]

    @pytest.mark.parametrize(
        "name",
        ["a\u0085b", "rel\u2028candidate", "x\u2029y", "a\x1cb", "a\x1eb", "a\x0bb", "a\x0cb"],
    )
    def test_only_newline_splits_tags(self, name):
        assert _parse_tag_lines(f"{name}\nv1.0\n".encode()) == [name, "v1.0"]

    def test_non_utf8_name_is_replaced(self):
        assert _parse_tag_lines(b"caf\xe9\nv1.0\n") == ["caf\ufffd", "v1.0"]
