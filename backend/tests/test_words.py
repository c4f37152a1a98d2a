import pytest

from dailyword.words import build_vocabulary, load_words


def test_packaged_list_is_clean():
    words = load_words()
    assert len(words) == len(set(words))
    assert all(len(w) == 5 and w.isalpha() and w.islower() for w in words)
    assert 'zzzzz' not in build_vocabulary(words)


def test_load_keeps_order_and_normalises(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('Crane\n\n  speed \nerase\n', encoding='utf-8')
    assert load_words(str(path)) == ('crane', 'speed', 'erase')


@pytest.mark.parametrize('content', ['', '\n\n', 'crane\nfour\n', 'crane\nnaïve\n'])
def test_load_rejects_bad_lists(tmp_path, content):
    path = tmp_path / 'words.txt'
    path.write_text(content, encoding='utf-8')
    with pytest.raises(ValueError):
        load_words(str(path))


def test_app_uses_configured_word_file(tmp_path):
    from dailyword import create_app
    from conftest import TestConfig

    path = tmp_path / 'words.txt'
    path.write_text('crane\nspeed\n', encoding='utf-8')

    class SmallListConfig(TestConfig):
        WORDS_FILE = str(path)

    application = create_app(SmallListConfig)
    assert application.extensions['game_service'].words == ('crane', 'speed')
