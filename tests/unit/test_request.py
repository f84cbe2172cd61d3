r"""Unit tests for the request descriptors."""

from __future__ import annotations

import dataclasses

import pytest

from pandadoc.request import MultipartFile, MultipartPayload, RequestSpec

#################################
#     Tests for RequestSpec     #
#################################


def test_request_spec_defaults() -> None:
    """Test the default values of a request descriptor."""
    spec = RequestSpec("get", "/public/v1/documents")
    assert spec.method == "GET"
    assert spec.path == "/public/v1/documents"
    assert spec.params == ()
    assert spec.headers == ()
    assert spec.require_auth
    assert spec.accept == ""
    assert spec.json is None
    assert spec.form is None
    assert spec.multipart is None
    assert spec.expected_status == ()


def test_request_spec_params_from_mapping() -> None:
    """Test that a mapping of params becomes string pairs."""
    spec = RequestSpec("GET", "/x", params={"page": 2, "q": "quote"})
    assert spec.params == (("page", "2"), ("q", "quote"))


def test_request_spec_params_list_values() -> None:
    """Test that list values are expanded into repeated keys."""
    spec = RequestSpec("GET", "/x", params={"types": ["regular", "bundle"]})
    assert spec.params == (("types", "regular"), ("types", "bundle"))


def test_request_spec_params_from_pairs() -> None:
    """Test that repeated keys in a pair sequence are all kept."""
    spec = RequestSpec("GET", "/x", params=[("tag", "a"), ("tag", "b")])
    assert spec.params == (("tag", "a"), ("tag", "b"))


def test_request_spec_headers_keep_order() -> None:
    """Test that extra headers keep their order and repeated names."""
    spec = RequestSpec("GET", "/x", headers=[("X-Trace", "1"), ("X-Trace", "2")])
    assert spec.headers == (("X-Trace", "1"), ("X-Trace", "2"))


def test_request_spec_form_from_mapping() -> None:
    """Test that form values are converted to string pairs."""
    spec = RequestSpec("POST", "/x", form={"grant_type": "code", "n": 1})
    assert spec.form == (("grant_type", "code"), ("n", "1"))


def test_request_spec_is_frozen() -> None:
    """Test that a request descriptor cannot be mutated."""
    spec = RequestSpec("GET", "/x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.path = "/y"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("status_code", "expected"), [(200, True), (201, True), (299, True), (199, False), (300, False)]
)
def test_request_spec_is_expected_any_2xx(status_code: int, expected: bool) -> None:
    """Test that an empty expected set accepts any 2xx status."""
    assert RequestSpec("GET", "/x").is_expected(status_code) is expected


@pytest.mark.parametrize(("status_code", "expected"), [(201, True), (200, False), (204, False)])
def test_request_spec_is_expected_explicit(status_code: int, expected: bool) -> None:
    """Test that an explicit expected set is matched exactly."""
    spec = RequestSpec("POST", "/x", expected_status=[201])
    assert spec.expected_status == (201,)
    assert spec.is_expected(status_code) is expected


######################################
#     Tests for MultipartPayload     #
######################################


def test_multipart_file_defaults() -> None:
    """Test the default names of a file part."""
    part = MultipartFile(content=b"data")
    assert part.field_name == "file"
    assert part.file_name == "upload.bin"
    assert part.content_type == "application/octet-stream"


def test_multipart_payload_defaults() -> None:
    """Test that an empty payload has no fields and no files."""
    payload = MultipartPayload()
    assert dict(payload.fields) == {}
    assert payload.files == ()
