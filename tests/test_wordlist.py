import pytest

from dicephrase import wordlist


def _check_wordlist(words):
    assert isinstance(words, tuple)
    for word in words:
        assert isinstance(word, str)
        assert len(word) > 0
        assert not any(c.isspace() for c in word)
    assert len(set(words)) == len(words), "no duplicate words"


def test_full_wordlist():
    words = wordlist.load_wordlist(wordlist.FULL_WORDLIST)
    _check_wordlist(words)
    assert len(words) == 6 ** 5


def test_short_wordlist():
    words = wordlist.load_wordlist(wordlist.SHORT_WORDLIST)
    _check_wordlist(words)
    assert 0 < len(words) < len(wordlist.load_wordlist())


def test_wordlist_cached():
    assert wordlist.load_wordlist() is wordlist.load_wordlist()


def test_select_wordlist():
    assert wordlist.select_wordlist() is wordlist.load_wordlist(wordlist.FULL_WORDLIST)
    assert wordlist.select_wordlist(short=True) is wordlist.load_wordlist(wordlist.SHORT_WORDLIST)


def test_filter_wordlist():
    lines = ["11111\tabacus\n", "\n", "  abdomen \n", "11113 abacus\n", "abide"]
    assert wordlist.filter_wordlist(lines) == ('abacus', 'abdomen', 'abide')


def test_custom_wordfile(tmp_path):
    wordfile = tmp_path / 'words.txt'
    wordfile.write_text("1 one\n2 two\n3 three\n", encoding='utf-8')
    words = wordlist.select_wordlist(short=True, wordfile=str(wordfile))
    assert words == ('one', 'two', 'three')


def test_missing_wordfile(tmp_path):
    with pytest.raises(wordlist.WordlistError):
        wordlist.load_wordlist(str(tmp_path / 'does-not-exist'))


def test_empty_wordfile(tmp_path):
    wordfile = tmp_path / 'empty.txt'
    wordfile.write_text("\n\n", encoding='utf-8')
    with pytest.raises(wordlist.WordlistError, match="empty"):
        wordlist.load_wordlist(str(wordfile))


def test_unknown_wordlist_name():
    with pytest.raises(wordlist.WordlistError, match="not found"):
        wordlist.load_wordlist('eff-lnog')
    with pytest.raises(wordlist.WordlistError):
        wordlist.select_wordlist(wordfile='/does/not/exist')


def test_locate_wordfile(tmp_path):
    assert wordlist.locate_wordfile(wordlist.FULL_WORDLIST) == \
           wordlist.STATIC_DIR / wordlist.FULL_WORDLIST
    wordfile = tmp_path / 'words.txt'
    wordfile.write_text("one\n", encoding='utf-8')
    assert wordlist.locate_wordfile(str(wordfile)) == wordfile
