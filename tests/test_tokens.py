"""Tests for the token stream reader."""

import numpy as np
import pytest
from eda_shapes.shapes.tokens import ShapeTag, TokenReader, classify, load_elements, tokenize
from eda_shapes.shapes.errors import ArityError, MalformedToken


class TestShapeTag:
    """Tests for ShapeTag."""

    def test_from_code(self):
        assert ShapeTag.from_code("CARC") == ShapeTag.CENTER_ARC

    def test_from_code_unknown(self):
        with pytest.raises(ValueError):
            ShapeTag.from_code("carc")

    def test_lookup(self):
        assert ShapeTag.lookup("L") == ShapeTag.LINE
        assert ShapeTag.lookup("XYZ") is None
        assert ShapeTag.lookup(5) is None

    def test_leading_tags(self):
        assert ShapeTag.RECTANGLE.leads
        assert ShapeTag.CIRCLE.leads
        assert not ShapeTag.ARC.leads


class TestTokenize:
    """Tests for element classification."""

    def test_text_array(self):
        assert tokenize('[1, 2.5, "L", -3]') == [1.0, 2.5, ShapeTag.LINE, -3.0]

    def test_numeric_strings(self):
        assert tokenize(["10.5", "-2", "1e3"]) == [10.5, -2.0, 1000.0]

    def test_numpy_scalars(self):
        tokens = tokenize([np.int64(3), np.float32(0.5)])
        assert tokens == [3.0, 0.5]
        assert all(isinstance(t, float) for t in tokens)

    def test_numpy_array(self):
        assert load_elements(np.array([1.0, 2.0])) == [1.0, 2.0]

    @pytest.mark.parametrize("element", [True, None, [1, 2], {"x": 1}, "abc", "nan", float("inf")])
    def test_rejected_elements(self, element):
        with pytest.raises(MalformedToken) as exc:
            classify(element, 4)
        assert exc.value.offset == 4

    def test_offset_of_bad_element(self):
        with pytest.raises(MalformedToken) as exc:
            tokenize([0, 0, "L", 1, None])
        assert exc.value.offset == 4

    def test_invalid_json(self):
        with pytest.raises(MalformedToken):
            tokenize("[0, 0, L]")

    def test_json_object_rejected(self):
        with pytest.raises(MalformedToken):
            tokenize('{"path": [0, 0, "L"]}')

    def test_non_array_source(self):
        with pytest.raises(MalformedToken) as exc:
            load_elements(5)
        assert exc.value.offset == 0

    def test_classified_tags_pass_through(self):
        assert tokenize([0.0, 0.0, ShapeTag.ARC]) == [0.0, 0.0, ShapeTag.ARC]
        assert ShapeTag.lookup(ShapeTag.CIRCLE) == ShapeTag.CIRCLE

    def test_tags_are_case_sensitive(self):
        with pytest.raises(MalformedToken):
            tokenize(["circle"])


class TestTokenReader:
    """Tests for TokenReader."""

    def test_read_sequence(self):
        reader = TokenReader([ShapeTag.CIRCLE, 1.0, 2.0, 3.0])
        assert reader.read_tag() == ShapeTag.CIRCLE
        assert reader.read_pair() == (1.0, 2.0)
        assert reader.remaining() == 1
        assert reader.read_number() == 3.0
        assert not reader.can_read()
        reader.expect_end()

    def test_peek(self):
        reader = TokenReader([0.0, 0.0, ShapeTag.ARC])
        assert reader.peek() == 0.0
        assert reader.peek(2) == ShapeTag.ARC
        assert reader.peek(3) is None
        assert reader.offset == 0

    def test_read_past_end(self):
        reader = TokenReader([1.0])
        reader.read_number()
        with pytest.raises(ArityError) as exc:
            reader.read_number()
        assert exc.value.offset == 1

    def test_tag_where_number_expected(self):
        reader = TokenReader([ShapeTag.LINE])
        with pytest.raises(ArityError):
            reader.read_number()

    def test_number_where_tag_expected(self):
        reader = TokenReader([1.0])
        with pytest.raises(ArityError):
            reader.read_tag()

    def test_expect_end_with_leftovers(self):
        reader = TokenReader([1.0, 2.0])
        reader.read_number()
        with pytest.raises(ArityError, match="1 unexpected trailing"):
            reader.expect_end()
