from collections import Counter

import pytest

from lyricindex.index import (
    CAPACITY,
    HashCounter,
    InvertedIndex,
    Posting,
    TermFreq,
    djb2_hash,
    read_file,
)


def test_hash_of_empty_is_seed():
    assert djb2_hash("", 1 << 64) == 5381
    assert djb2_hash("", 1024) == 5381 % 1024


@pytest.mark.parametrize("key", ["a", "hello", "some longer key here" * 10])
@pytest.mark.parametrize("mod", [1, 7, 1024, 4096])
def test_hash_is_reduced_modulo(key, mod):
    full = djb2_hash(key, 1 << 64)
    assert djb2_hash(key, mod) == full % mod
    assert 0 <= djb2_hash(key, mod) < mod


def test_counter_insert_and_get():
    counter = HashCounter()
    assert counter.insert("word", 3) is True
    assert counter.insert("word", 9) is False
    assert counter.get("word") == 3
    assert len(counter) == 1


def test_counter_get_missing_raises():
    with pytest.raises(KeyError):
        HashCounter().get("absent")


def test_counter_increment():
    counter = HashCounter()
    assert counter.increment("x") == 1
    assert counter.increment("x") == 2
    assert counter.get("x") == 2


def test_counter_invalid_capacity():
    with pytest.raises(ValueError):
        HashCounter(0)


def test_counter_grows_past_capacity():
    counter = HashCounter(2)
    words = [f"w{i}" for i in range(20)]
    for i, word in enumerate(words):
        assert counter.insert(word, i)
    assert len(counter) == len(words)
    for i, word in enumerate(words):
        assert counter.get(word) == i


def test_counter_from_words_matches_counter():
    words = "the cat and the hat and the bat".split()
    counter = HashCounter.from_words(words)
    assert dict(counter.items()) == dict(Counter(words))
    assert len(counter) == len(set(words))


def test_counter_render_lines():
    counter = HashCounter.from_words(["a", "b", "a"])
    lines = counter.render().splitlines()
    assert sorted(lines) == sorted(["a \t=> 2", "b \t=> 1"])


def test_read_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"Hello there")
    assert read_file(path) == "Hello there"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path / "missing.txt")


def test_posting_doc_freq():
    posting = Posting("term", [TermFreq(0, 2), TermFreq(3, 1)])
    assert posting.doc_freq == 2


def test_index_add_text_assigns_ids_and_postings():
    index = InvertedIndex()
    assert index.add_text("one", "The sun, the moon") == 0
    assert index.add_text("two", "the stars") == 1
    assert index.collection == ["one", "two"]
    assert index.postings("the") == [TermFreq(0, 2), TermFreq(1, 1)]
    assert index.postings("stars") == [TermFreq(1, 1)]
    assert index.postings("absent") == []


def test_index_terms_invariants():
    docs = ["a b c a", "b c d", "d d d e"]
    index = InvertedIndex()
    for i, text in enumerate(docs):
        index.add_text(str(i), text)
    postings = index.terms()
    assert len(postings) == len(index)
    assert {p.term for p in postings} == set(" ".join(docs).split())
    for posting in postings:
        containing = [i for i, text in enumerate(docs) if posting.term in text.split()]
        assert [e.doc_id for e in posting.entries] == containing
        for entry in posting.entries:
            assert entry.freq == docs[entry.doc_id].split().count(posting.term)


def test_index_many_terms_beyond_capacity():
    index = InvertedIndex()
    words = [f"t{i}" for i in range(CAPACITY + 50)]
    index.add_text("big", " ".join(words))
    assert len(index) == len(words)
    assert index.postings(words[-1]) == [TermFreq(0, 1)]


def test_index_add_document(tmp_path):
    path = tmp_path / "song.txt"
    path.write_text("Love love me do")
    index = InvertedIndex()
    assert index.add_document(path) == 0
    assert index.collection == [str(path)]
    assert index.postings("love") == [TermFreq(0, 2)]


def test_index_add_missing_document(tmp_path):
    index = InvertedIndex()
    with pytest.raises(OSError):
        index.add_document(tmp_path / "nope.txt")
    assert index.collection == []


def test_index_render():
    index = InvertedIndex()
    index.add_text("first", "x y x")
    index.add_text("second", "y")
    output = index.render()
    assert "INVERTED INDEX (2   docs)" in output
    assert "  [0] first\n" in output
    assert "  [1] second\n" in output
    assert f"Terms (total {len(index)}):" in output
    assert "  • y (df=2): [0:1], [1:1]\n" in output
    assert "  • x (df=1): [0:2]\n" in output