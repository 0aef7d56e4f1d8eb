# lyricindex

`lyricindex` reads every file in a folder, breaks the text into lower-case
words and builds an inverted index: for each word, the documents it appears in
and how often it appears in each one. The index is then printed as a list of
documents followed by every term with its postings.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
lyricindex path/to/songs
```

The folder argument is optional; without it the command reads `../songs`
relative to the current directory.

Only regular files directly inside the folder are read; sub-folders are
skipped, and files are taken in order of their names. The command first prints
a blank line and one `File: <path>` line per file found, then the index:

```
╔══════════════════════════════════════╗
║        INVERTED INDEX (2   docs)     ║
╚══════════════════════════════════════╝

Document Collection:
  [0] path/to/songs/first.txt
  [1] path/to/songs/second.txt

Terms (total 42):
  • love (df=2): [0:3], [1:1]
  ...
```

Each posting `[doc:freq]` gives the document number and how many times the
term occurs in that document; `df` is the number of documents that contain
the term. Terms are listed in the order of the index's internal hash table,
not alphabetically.

If the folder cannot be opened, `Failed to open folder: <folder>` is written
to standard error and an empty index is printed. A file that cannot be read is
reported as `ERROR: cannot open file: <path>` on standard error and skipped.
The command exits with status 0 in every case.

## How text is split

`lyricindex.text.normalize` changes every character outside printable ASCII
into a space and lower-cases the rest. `lyricindex.text.split` then cuts the
normalised text at whitespace and punctuation (`-.,!?;:"'()[]{}<>`) and
returns the words in order. Files are read byte for byte (each byte becomes
one character), so accented letters and other non-ASCII bytes act as word
separators.

```python
from lyricindex.text import split

split("Hello, World! Hello-again.")
# ['hello', 'world', 'hello', 'again']
```

`lyricindex.text.is_word_char(c)` tells whether a single character is an
ASCII letter or digit.

## Using the index from Python

```python
from lyricindex.index import HashCounter, InvertedIndex

counts = HashCounter.from_words(["a", "b", "a"])
counts.get("a")        # 2
counts.increment("b")  # 2
print(counts.render())  # one "key \t=> count" line per word

index = InvertedIndex()
index.add_text("greeting", "hello hello world")   # returns document id 0
index.add_text("farewell", "goodbye world")       # returns document id 1
index.postings("world")
# [TermFreq(doc_id=0, freq=1), TermFreq(doc_id=1, freq=1)]
print(index.render())
```

- `HashCounter.insert(key, val)` adds a key only if it is not yet present and
  returns whether it did; `HashCounter.get(key)` raises `KeyError` for an
  unknown key; `items()` yields `(key, count)` pairs.
- `InvertedIndex.add_document(path)` reads a file with
  `lyricindex.index.read_file` and indexes it under its path; it raises
  `OSError` if the file cannot be read.
- `InvertedIndex.postings(term)` returns a list of `TermFreq(doc_id, freq)`,
  empty for a term that is not indexed. `InvertedIndex.terms()` returns every
  `Posting` (with `term`, `entries` and `doc_freq`), and `collection` holds
  the document names in id order.
- `lyricindex.cli.list_files(folder)` returns the paths the command indexes.
- `lyricindex.index.djb2_hash(key, mod)` is the hash used by the tables.

## What it does not do

The index lives in memory only: it is not saved to disk or loaded back, and
there is no query or search command. The command builds the index and prints
it; looking terms up is done from Python with `InvertedIndex.postings`.