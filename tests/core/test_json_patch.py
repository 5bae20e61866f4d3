"""
Unit tests for the JSON Patch interpreter.
"""

import pytest

from app.core.json_patch import JsonPatchError, apply_patch, parse_pointer


@pytest.fixture
def movie_doc():
    return {"title": "Inception", "duration": 148, "director": None, "genre": "Sci-Fi"}


class TestParsePointer:
    """Tests for JSON Pointer parsing."""

    def test_root(self):
        """Test that the empty pointer addresses the whole document."""
        assert parse_pointer("") == []

    def test_escapes(self):
        """Test that ~1 and ~0 unescape to / and ~."""
        assert parse_pointer("/a~1b/~0c") == ["a/b", "~c"]

    def test_must_start_with_slash(self):
        """Test that a pointer without a leading slash is refused."""
        with pytest.raises(JsonPatchError):
            parse_pointer("title")


class TestApplyPatch:
    """Tests for each operation and failure mode."""

    def test_replace(self, movie_doc):
        """Test replacing an existing member."""
        result = apply_patch(movie_doc, [{"op": "replace", "path": "/duration", "value": 150}])
        assert result["duration"] == 150

    def test_input_not_modified(self, movie_doc):
        """Test that the caller's document is left untouched."""
        apply_patch(movie_doc, [{"op": "replace", "path": "/title", "value": "Tenet"}])
        assert movie_doc["title"] == "Inception"

    def test_replace_missing_member_fails(self, movie_doc):
        """Test that replace needs the target to exist."""
        with pytest.raises(JsonPatchError):
            apply_patch(movie_doc, [{"op": "replace", "path": "/rating", "value": 5}])

    def test_add_sets_member(self, movie_doc):
        """Test that add overwrites an object member."""
        result = apply_patch(movie_doc, [{"op": "add", "path": "/director", "value": "Nolan"}])
        assert result["director"] == "Nolan"

    def test_remove(self, movie_doc):
        """Test removing an object member."""
        result = apply_patch(movie_doc, [{"op": "remove", "path": "/genre"}])
        assert "genre" not in result

    def test_move(self, movie_doc):
        """Test moving a value between members."""
        result = apply_patch(movie_doc, [{"op": "move", "from": "/genre", "path": "/director"}])
        assert result["director"] == "Sci-Fi"
        assert "genre" not in result

    def test_copy(self, movie_doc):
        """Test copying a value, keeping the source."""
        result = apply_patch(movie_doc, [{"op": "copy", "from": "/title", "path": "/director"}])
        assert result["director"] == "Inception"
        assert result["title"] == "Inception"

    def test_test_passes(self, movie_doc):
        """Test that a matching test lets later operations run."""
        result = apply_patch(movie_doc, [
            {"op": "test", "path": "/duration", "value": 148},
            {"op": "replace", "path": "/duration", "value": 149},
        ])
        assert result["duration"] == 149

    def test_test_failure_aborts(self, movie_doc):
        """Test that a failed test aborts and names the operation index."""
        with pytest.raises(JsonPatchError) as exc_info:
            apply_patch(movie_doc, [
                {"op": "replace", "path": "/duration", "value": 149},
                {"op": "test", "path": "/title", "value": "Tenet"},
            ])
        assert exc_info.value.index == 1
        assert str(exc_info.value).startswith("Operation 1:")

    def test_array_operations(self):
        """Test insert, append and remove on arrays."""
        doc = {"tags": ["a", "c"]}
        result = apply_patch(doc, [
            {"op": "add", "path": "/tags/1", "value": "b"},
            {"op": "add", "path": "/tags/-", "value": "d"},
            {"op": "remove", "path": "/tags/0"},
        ])
        assert result == {"tags": ["b", "c", "d"]}

    def test_array_index_out_of_range(self):
        """Test that an index past the end is refused."""
        with pytest.raises(JsonPatchError):
            apply_patch({"tags": []}, [{"op": "remove", "path": "/tags/0"}])

    @pytest.mark.parametrize("token", ["²", "١", "01", "-1", "x"])
    def test_invalid_array_index(self, token):
        """Test that non-ASCII digits and malformed indexes raise a patch error."""
        with pytest.raises(JsonPatchError, match="Invalid array index"):
            apply_patch({"tags": ["a"]}, [{"op": "add", "path": f"/tags/{token}", "value": "b"}])

    def test_nested_path(self):
        """Test addressing a nested member."""
        doc = {"crew": {"director": "Nolan"}}
        result = apply_patch(doc, [{"op": "replace", "path": "/crew/director", "value": "Villeneuve"}])
        assert result == {"crew": {"director": "Villeneuve"}}

    def test_replace_root(self, movie_doc):
        """Test replacing the whole document."""
        assert apply_patch(movie_doc, [{"op": "replace", "path": "", "value": {"a": 1}}]) == {"a": 1}

    def test_move_into_own_child_fails(self):
        """Test that a value cannot be moved inside itself."""
        with pytest.raises(JsonPatchError):
            apply_patch({"a": {"b": 1}}, [{"op": "move", "from": "/a", "path": "/a/c"}])

    def test_unknown_operation(self, movie_doc):
        """Test that an unknown op is refused."""
        with pytest.raises(JsonPatchError, match="Unknown operation"):
            apply_patch(movie_doc, [{"op": "merge", "path": "/title"}])

    def test_missing_value(self, movie_doc):
        """Test that replace without a value is refused."""
        with pytest.raises(JsonPatchError, match="requires 'value'"):
            apply_patch(movie_doc, [{"op": "replace", "path": "/title"}])

    def test_missing_from(self, movie_doc):
        """Test that copy without a source is refused."""
        with pytest.raises(JsonPatchError, match="requires 'from'"):
            apply_patch(movie_doc, [{"op": "copy", "path": "/title"}])

    def test_patch_must_be_array(self, movie_doc):
        """Test that a non-array patch document is refused."""
        with pytest.raises(JsonPatchError):
            apply_patch(movie_doc, {"op": "remove", "path": "/title"})

    def test_operation_must_be_object(self, movie_doc):
        """Test that each operation must be an object."""
        with pytest.raises(JsonPatchError):
            apply_patch(movie_doc, ["remove"])

    def test_empty_patch_is_identity(self, movie_doc):
        """Test that an empty patch returns an equal document."""
        assert apply_patch(movie_doc, []) == movie_doc
