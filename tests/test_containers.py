from dataclasses import dataclass

import pytest

from dsakit.containers import Collection, DynamicArray, LinkedList

KINDS = ["dynamic", "linked"]


@dataclass
class Person:
    name: str
    age: int


@pytest.mark.parametrize("kind", KINDS)
def test_int_sequence(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    for value in [23, 4, 11, 4, 7, 8]:
        coll.insert_at_end(value)
    assert len(coll) == 6
    assert coll.get(2) == 11
    assert coll.find(7) == 4
    coll.remove_at_beginning()
    assert coll.get(0) == 4
    assert len(coll) == 5
    for i in range(100):
        coll.insert(i, 3)
    assert coll.get(1) == 11
    assert coll.get(3) == 99
    assert coll.get(102) == 0
    assert len(coll) == 105
    coll.remove_at_end()
    assert len(coll) == 104
    assert coll.get(103) == 7
    assert coll.get(0) == 4
    assert coll.contains(50) is True
    coll.remove(50)
    assert coll.contains(50) is False
    assert len(coll) == 103
    coll.insert_at_beginning(1023)
    coll.insert_at_beginning(4324)
    assert coll.contains(4678) is False
    assert coll.contains(1023) is True
    assert len(coll) == 105
    assert coll.get(0) == 4324


@pytest.mark.parametrize("kind", KINDS)
def test_string_sequence(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    for value in ["hi", "b", "d", "wo", "t", "e"]:
        coll.insert_at_end(value)
    assert len(coll) == 6
    assert coll.get(2) == "d"
    assert coll.find("t") == 4
    coll.remove_at_beginning()
    assert coll.get(0) == "b"
    assert len(coll) == 5
    for i in range(100):
        coll.insert("A" * i, 3)
    assert coll.get(1) == "d"
    assert coll.get(3) == "A" * 99
    assert coll.get(102) == ""
    assert len(coll) == 105
    coll.remove_at_end()
    assert len(coll) == 104
    assert coll.get(103) == "t"
    assert coll.get(0) == "b"
    assert "AAAA" in coll
    coll.remove("AAAAAAA")
    assert "AAAAAAA" not in coll
    assert len(coll) == 103
    coll.insert_at_beginning("Bob")
    coll.insert_at_beginning("Mary")
    assert "Sanford" not in coll
    assert "Bob" in coll
    assert len(coll) == 105
    assert coll.get(0) == "Mary"


@pytest.mark.parametrize("kind", KINDS)
def test_person_sequence(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    for person in [Person("Drew", 65), Person("Ellen", 66)]:
        coll.insert_at_end(person)
    assert len(coll) == 2
    assert coll.get(1).age == 66
    assert coll.find(Person("Drew", 65)) == 0
    coll.remove_at_beginning()
    assert coll.get(0) == Person("Ellen", 66)
    assert len(coll) == 1
    for _ in range(100):
        coll.insert(Person("Clone", 18), 1)
    assert coll.get(1).name == "Clone"
    assert coll.get(3) == Person("Clone", 18)
    assert coll.get(100) == Person("Clone", 18)
    assert len(coll) == 101
    coll.remove_at_end()
    assert len(coll) == 100
    assert coll.get(99) == Person("Clone", 18)
    assert coll.get(0) == Person("Ellen", 66)
    assert coll.contains(Person("Ellen", 66)) is True
    assert coll.contains(Person("Clone", 18)) is True
    coll.remove(Person("Ellen", 66))
    assert coll.contains(Person("Ellen", 66)) is False
    assert len(coll) == 99
    coll.insert_at_beginning(Person("Matteo", 23))
    coll.insert_at_beginning(Person("Sarah", 33))
    assert coll.contains(Person("Drew", 65)) is False
    assert coll.contains(Person("Matteo", 23)) is True
    assert len(coll) == 101
    assert coll.get(0) == Person("Sarah", 33)


def test_dynamic_array_capacity():
    da = DynamicArray(5)
    assert da.capacity == 5
    for i in range(10):
        da.insert_at_end(i)
    assert da.capacity == 10
    da.insert_at_end(10)
    assert da.capacity == 20
    da.set_capacity(3)
    assert da.capacity == 3
    assert len(da) == 3
    assert da[2] == 2


def test_dynamic_array_default_capacity():
    assert DynamicArray().capacity == 10


def test_dynamic_array_zero_capacity_grows():
    da = DynamicArray(0)
    da.insert_at_end("x")
    assert da.capacity >= 1
    assert da[0] == "x"


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)
    with pytest.raises(ValueError):
        DynamicArray().set_capacity(-2)


@pytest.mark.parametrize("kind", KINDS)
def test_matches_list_model(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    model = []
    operations = [
        ("end", 5), ("begin", 3), ("insert", (9, 1)), ("end", 7),
        ("remove_at", 2), ("begin", 1), ("remove_end", None),
        ("insert", (4, 3)), ("remove_begin", None), ("end", 6),
    ]
    for op, arg in operations:
        if op == "end":
            coll.insert_at_end(arg)
            model.append(arg)
        elif op == "begin":
            coll.insert_at_beginning(arg)
            model.insert(0, arg)
        elif op == "insert":
            coll.insert(*arg)
            model.insert(arg[1], arg[0])
        elif op == "remove_at":
            coll.remove_at(arg)
            del model[arg]
        elif op == "remove_end":
            coll.remove_at_end()
            model.pop()
        else:
            coll.remove_at_beginning()
            model.pop(0)
        assert list(coll) == model
        assert len(coll) == len(model)


@pytest.mark.parametrize("kind", KINDS)
def test_empty_then_refill(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    coll.insert_at_end(1)
    coll.remove_at_end()
    assert len(coll) == 0
    coll.insert_at_end(2)
    coll.insert_at_end(3)
    assert list(coll) == [2, 3]
    coll.remove_at_beginning()
    coll.remove_at_beginning()
    coll.insert_at_end(4)
    assert list(coll) == [4]


@pytest.mark.parametrize("kind", KINDS)
def test_remove_missing_item_is_noop(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    for value in [1, 2, 3]:
        coll.insert_at_end(value)
    coll.remove(42)
    assert list(coll) == [1, 2, 3]
    assert coll.find(42) == -1


@pytest.mark.parametrize("kind", KINDS)
def test_index_errors(kind):
    coll = DynamicArray() if kind == "dynamic" else LinkedList()
    with pytest.raises(IndexError):
        coll.get(0)
    with pytest.raises(IndexError):
        coll.remove_at_beginning()
    with pytest.raises(IndexError):
        coll.remove_at_end()
    with pytest.raises(IndexError):
        coll.insert(1, 1)
    coll.insert_at_end(1)
    assert coll.get(0) == 1
    with pytest.raises(IndexError):
        coll.get(-1)
    with pytest.raises(IndexError):
        coll[1]
    with pytest.raises(IndexError):
        coll.remove_at(1)


def test_collection_is_abstract():
    with pytest.raises(TypeError):
        Collection()