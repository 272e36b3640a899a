import io

import pytest

from dsalgo.hashing import ChainedHashTable, main


def test_items_land_in_remainder_bucket():
    table = ChainedHashTable(3)
    for value in (4, 7, 5):
        table.put(value)
    assert table.bucket(1) == (4, 7)
    assert table.bucket(2) == (5,)
    assert table.bucket(0) == ()


def test_every_item_in_its_bucket():
    table = ChainedHashTable(7)
    values = list(range(0, 100, 3))
    for value in values:
        table.put(value)
    for index in range(7):
        assert all(value % 7 == index for value in table.bucket(index))
    assert sorted(table) == values
    assert len(table) == len(values)


def test_capacity_rejects_extra_items():
    table = ChainedHashTable(5, capacity=2)
    assert table.put(1)
    assert table.put(2)
    assert table.put(3) is False
    assert len(table) == 2
    assert list(table) == [1, 2]


def test_iteration_follows_buckets():
    table = ChainedHashTable(2)
    for value in (3, 2, 5, 4):
        table.put(value)
    assert list(table) == [2, 4, 3, 5]


def test_format_empty_table():
    assert ChainedHashTable(2, 5).format() == "0 -> \\\n1 -> \\\n"


def test_format_with_chains():
    table = ChainedHashTable(2)
    for value in (4, 5, 7):
        table.put(value)
    assert table.format() == "0 -> 4 -> \\\n1 -> 5 -> 7 -> \\\n"


def test_bucket_out_of_range():
    table = ChainedHashTable(3)
    with pytest.raises(IndexError):
        table.bucket(3)
    with pytest.raises(IndexError):
        table.bucket(-1)


def test_buckets_must_be_positive():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


def test_main_prints_tables(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2 3\n4 5 7\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0 -> 4 -> \\\n1 -> 5 -> 7 -> \\\n\n"