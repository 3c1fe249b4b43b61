import pytest

from nlp_enrich.core.stopword_enrichment import sources
from nlp_enrich.core.stopword_enrichment.dictionary import StopWordDictionary
from nlp_enrich.core.stopword_enrichment.sources import (
    FileStopWordSource,
    InMemoryStopWordSource,
    NltkStopWordSource,
    build_stopword_source,
    parse_word_list,
)
from nlp_enrich.utils.exceptions import ConfigurationError


def test_parse_word_list_skips_comments_blanks_and_duplicates():
    lines = ["# version: 2\n", "the\n", "\n", "  of  \n", "the\n"]
    assert parse_word_list(lines) == frozenset({"the", "of"})


def test_packaged_english_list_loads():
    words = FileStopWordSource().load("english")
    assert {"the", "a", "of", "is"} <= words
    assert "dog" not in words
    assert not any(w.startswith("#") for w in words)


def test_file_source_reads_custom_directory(tmp_path):
    (tmp_path / "klingon.txt").write_text("# v1\nqaH\nghaH\n", encoding="utf-8")
    assert FileStopWordSource(tmp_path).load("klingon") == frozenset({"qaH", "ghaH"})


def test_file_source_missing_language(tmp_path):
    with pytest.raises(ConfigurationError) as exc:
        FileStopWordSource(tmp_path).load("english")
    assert exc.value.code == "STOPWORDS_RESOURCE_UNAVAILABLE"


def test_file_source_rejects_path_like_language(tmp_path):
    with pytest.raises(ConfigurationError):
        FileStopWordSource(tmp_path).load("../english")


def test_empty_file_fails_dictionary_construction(tmp_path):
    (tmp_path / "english.txt").write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc:
        StopWordDictionary.from_source(FileStopWordSource(tmp_path), "english")
    assert exc.value.code == "STOPWORDS_RESOURCE_EMPTY"


def test_file_source_unreadable_file(tmp_path):
    (tmp_path / "english.txt").write_bytes(b"the\n\xff\xfe\n")
    with pytest.raises(ConfigurationError) as exc:
        FileStopWordSource(tmp_path).load("english")
    assert exc.value.code == "STOPWORDS_RESOURCE_UNAVAILABLE"
    assert "could not be read" in exc.value.message


def test_in_memory_source_unknown_language():
    source = InMemoryStopWordSource({"english": ["the"]})
    assert source.load("english") == frozenset({"the"})
    with pytest.raises(ConfigurationError):
        source.load("french")


# -------------------------------------
# NLTK corpus (no network: corpus lookups are patched)
# -------------------------------------
class _FakeCorpus:
    def words(self, language):
        if language != "english":
            raise OSError(f"No such file: {language}")
        return ["the", "a", "the"]


def _missing_corpus(resource):
    raise LookupError(resource)


def test_nltk_source_missing_corpus_without_download(monkeypatch):
    monkeypatch.setattr(sources.nltk.data, "find", _missing_corpus)
    with pytest.raises(ConfigurationError):
        NltkStopWordSource(auto_download=False).load("english")


def test_nltk_source_downloads_when_allowed(monkeypatch):
    downloaded = []
    monkeypatch.setattr(sources.nltk.data, "find", _missing_corpus)
    monkeypatch.setattr(
        sources.nltk, "download", lambda name, quiet=False: downloaded.append(name)
    )
    monkeypatch.setattr(sources, "nltk_stopwords", _FakeCorpus())
    words = NltkStopWordSource(auto_download=True).load("english")
    assert downloaded == ["stopwords"]
    assert words == frozenset({"the", "a"})


def test_nltk_source_unknown_language(monkeypatch):
    monkeypatch.setattr(sources.nltk.data, "find", lambda resource: resource)
    monkeypatch.setattr(sources, "nltk_stopwords", _FakeCorpus())
    with pytest.raises(ConfigurationError):
        NltkStopWordSource().load("elvish")


# -------------------------------------
# Factory
# -------------------------------------
def test_build_source_from_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(sources.settings, "STOPWORDS_SOURCE", "file")
    monkeypatch.setattr(sources.settings, "STOPWORDS_DIR", str(tmp_path))
    source = build_stopword_source()
    assert isinstance(source, FileStopWordSource)
    assert source.directory == tmp_path

    monkeypatch.setattr(sources.settings, "NLTK_AUTO_DOWNLOAD", True)
    source = build_stopword_source("NLTK")
    assert isinstance(source, NltkStopWordSource)
    assert source.auto_download is True


def test_build_source_unknown_name():
    with pytest.raises(ConfigurationError) as exc:
        build_stopword_source("redis")
    assert exc.value.code == "UNKNOWN_STOPWORD_SOURCE"
