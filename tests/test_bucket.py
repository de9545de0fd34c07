"""Tests for the name-unique Bucket."""

from groupdata.bucket import Bucket, sort_key
from groupdata.schema import DeclarationNode


class TestBucket:
    def test_insert_unique_keeps_first_occurrence(self):
        bucket = Bucket()
        first = DeclarationNode("interface", "Foo")
        second = DeclarationNode("dictionary", "Foo")

        assert bucket.insert_unique(first) is True
        assert bucket.insert_unique(second) is False
        assert len(bucket) == 1
        assert bucket.get("Foo") is first

    def test_preserves_insertion_order(self):
        bucket = Bucket([DeclarationNode("interface", name) for name in ("Zeta", "Alpha", "Mid")])

        assert bucket.names() == ["Zeta", "Alpha", "Mid"]
        assert "Alpha" in bucket
        assert "Missing" not in bucket

    def test_sorted_returns_new_bucket(self):
        bucket = Bucket([DeclarationNode("interface", name) for name in ("Zeta", "Alpha", "Mid")])

        ordered = bucket.sorted()

        assert ordered.names() == ["Alpha", "Mid", "Zeta"]
        assert bucket.names() == ["Zeta", "Alpha", "Mid"]

    def test_sort_is_case_insensitive_first(self):
        names = ["HTMLElement", "Headers", "abort", "Blob"]
        bucket = Bucket([DeclarationNode("interface", name) for name in names])

        assert bucket.sorted().names() == ["abort", "Blob", "Headers", "HTMLElement"]

    def test_sort_key_puts_lowercase_first_on_ties(self):
        assert sorted(["URL", "url", "Foo", "foo"], key=sort_key) == ["foo", "Foo", "url", "URL"]
