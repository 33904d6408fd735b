"""Tests for the deduplicating list."""

from __future__ import annotations

from starsql.dedup import DedupList, equality_matcher


def _same_first_letter(a: str, b: str) -> bool:
    return a[:1] == b[:1]


class TestAdd:
    def test_add_new_item(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        assert items.add("apple") is True
        assert len(items) == 1

    def test_add_equal_item_is_noop(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        items.add("apple")
        assert items.add("avocado") is False
        assert len(items) == 1
        assert list(items) == ["apple"]

    def test_insertion_order_preserved(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        for word in ["cherry", "apple", "banana"]:
            items.add(word)
        assert list(items) == ["cherry", "apple", "banana"]


class TestLookup:
    def test_index_uses_equality_predicate(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        items.add("apple")
        items.add("banana")
        assert items.index("blueberry") == 1
        assert items.index("kiwi") is None

    def test_index_where(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        items.add("apple")
        items.add("banana")
        assert items.index_where(lambda s: s.endswith("na")) == 1

    def test_find(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        items.add("apple")
        assert items.find(lambda s: s.startswith("a")) == "apple"
        assert items.find(lambda s: s.startswith("z")) is None

    def test_contains(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        items.add("apple")
        assert "apricot" in items
        assert "pear" not in items

    def test_equality_matcher(self) -> None:
        match = equality_matcher(_same_first_letter, "apple")
        assert match("ant") is True
        assert match("bee") is False


class TestEach:
    def test_visits_all_in_order(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        for word in ["a", "b", "c"]:
            items.add(word)
        seen: list[str] = []

        def visit(item: str) -> bool:
            seen.append(item)
            return True

        items.each(visit)
        assert seen == ["a", "b", "c"]

    def test_early_stop(self) -> None:
        items: DedupList[str] = DedupList(_same_first_letter)
        for word in ["a", "b", "c"]:
            items.add(word)
        seen: list[str] = []

        def visit(item: str) -> bool:
            seen.append(item)
            return item != "b"

        items.each(visit)
        assert seen == ["a", "b"]
