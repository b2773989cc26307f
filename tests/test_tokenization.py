from text_diff_checker.tokenization import span_text, tokenize_words


def test_tokenize_words_returns_offsets():
    text = "Hello,  world!\nIt's sunny."
    tokens = tokenize_words(text)

    assert [token.text for token in tokens] == ["Hello,", "world!", "It's", "sunny."]
    assert tokens[0].start_char == 0
    assert tokens[0].end_char == 6
    assert tokens[-1].text == "sunny."
    assert text[tokens[-1].start_char : tokens[-1].end_char] == "sunny."


def test_tokenize_words_ignores_surrounding_whitespace():
    assert tokenize_words("") == []
    assert tokenize_words(" \n\t ") == []
    assert [t.text for t in tokenize_words("  one   two ")] == ["one", "two"]


def test_span_text_keeps_inner_whitespace():
    text = "Hello,  world!\nIt's sunny."
    tokens = tokenize_words(text)

    assert span_text(text, tokens[1:3]) == "world!\nIt's"
    assert span_text(text, []) == ""
