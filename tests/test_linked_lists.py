import pytest

from dsalgo.linked_lists import (
    ArrayList,
    CircularList,
    DoublyLinkedList,
    Playlist,
    SinglyLinkedList,
)


def _built_front_first(values):
    lst = SinglyLinkedList()
    for value in values:
        lst.insert_first(value)
    return lst


def test_insert_first_reverses_order():
    lst = _built_front_first([10, 20, 30])
    assert list(lst) == [30, 20, 10]
    assert str(lst) == "30->20->10->NULL"


def test_empty_list_str():
    assert str(SinglyLinkedList()) == "NULL"


def test_search_finds_node_or_none():
    lst = _built_front_first([10, 20, 30])
    node = lst.search(30)
    assert node is lst.head
    assert node.data == 30
    assert lst.search(99) is None


def test_delete_first_until_empty():
    lst = _built_front_first(range(5))
    assert [lst.delete_first() for _ in range(5)] == [4, 3, 2, 1, 0]
    with pytest.raises(IndexError):
        lst.delete_first()


def test_insert_after_and_delete_after_round_trip():
    lst = SinglyLinkedList([1, 3])
    first = lst.search(1)
    lst.insert_after(first, 2)
    assert list(lst) == [1, 2, 3]
    assert lst.delete_after(first) == 2
    assert list(lst) == [1, 3]
    with pytest.raises(IndexError):
        lst.delete_after(lst.search(3))


def test_concat_lists():
    first = _built_front_first([10, 20, 30])
    second = _built_front_first([40, 50])
    result = first.concat(second)
    assert result is first
    assert list(first) == [30, 20, 10, 50, 40]
    assert list(second) == []


def test_concat_into_empty():
    empty = SinglyLinkedList()
    empty.concat(SinglyLinkedList([1, 2]))
    assert list(empty) == [1, 2]


def test_array_list_sequence():
    lst = ArrayList()
    lst.insert(0, 10)
    lst.insert(0, 20)
    lst.insert(0, 30)
    lst.insert_last(40)
    assert lst.delete(0) == 30
    lst.insert_first(333)
    assert list(lst) == [333, 20, 10, 40]
    assert str(lst) == "333->20->10->40->"
    assert lst.get_entry(1) == 20
    assert len(lst) == 4


def test_array_list_errors():
    lst = ArrayList(capacity=2)
    with pytest.raises(IndexError):
        lst.delete(0)
    with pytest.raises(IndexError):
        lst.get_entry(0)
    lst.insert_last(1)
    with pytest.raises(IndexError):
        lst.insert(5, 2)
    lst.insert_last(2)
    assert lst.is_full()
    with pytest.raises(OverflowError):
        lst.insert_first(0)


def test_circular_list_order():
    lst = CircularList()
    lst.insert_last(20)
    lst.insert_last(30)
    lst.insert_last(40)
    lst.insert_first(10)
    assert list(lst) == [10, 20, 30, 40]
    assert str(lst) == "10->20->30->40->"


def test_circular_list_turns_cycle():
    players = CircularList(["KIM", "PARK", "CHOI"])
    assert list(players.turns(10)) == (["KIM", "PARK", "CHOI"] * 4)[:10]


def test_circular_list_turns_on_empty():
    assert list(CircularList().turns(0)) == []
    with pytest.raises(IndexError):
        CircularList().turns(1)
    with pytest.raises(ValueError):
        CircularList([1]).turns(-1)


def test_doubly_linked_insert_and_delete():
    dl = DoublyLinkedList()
    for value in range(5):
        dl.insert(value)
    assert list(dl) == [4, 3, 2, 1, 0]
    assert str(dl).startswith("<-| |4| |->")
    assert [dl.delete_first() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert dl.is_empty()
    with pytest.raises(IndexError):
        dl.delete_first()


def test_playlist_starts_at_last_added():
    playlist = Playlist(["Mamamia", "Dancing Queen", "fernando"])
    assert playlist.current == "fernando"
    assert str(playlist) == "<-| #fernando# |-> <-| Dancing Queen |-> <-| Mamamia |->"


def test_playlist_navigation_wraps_past_head():
    playlist = Playlist(["Mamamia", "Dancing Queen", "fernando"])
    assert playlist.next() == "Dancing Queen"
    assert playlist.next() == "Mamamia"
    assert playlist.next() == "fernando"
    assert playlist.previous() == "Mamamia"


def test_playlist_commands():
    playlist = Playlist(["Mamamia", "Dancing Queen", "fernando"])
    assert playlist.handle_command(">\n") is True
    assert playlist.current == "Dancing Queen"
    assert playlist.handle_command("<") is True
    assert playlist.current == "fernando"
    assert playlist.handle_command("q") is False


def test_empty_playlist_cannot_move():
    playlist = Playlist()
    assert playlist.current is None
    with pytest.raises(IndexError):
        playlist.next()
    playlist.add("solo")
    assert playlist.next() == "solo"