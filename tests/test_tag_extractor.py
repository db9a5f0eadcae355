"""Tests for routing metadata extraction from secret tags."""
import pytest

from src.application.services.tag_extractor import (
    extract_tags,
    get_filename,
    get_namespaces,
    get_secret_name,
)
from src.domain.entities.secret import SecretDescriptor, Tag
from src.domain.errors import MissingTag

from tests.helpers import FILENAME_TAG, NAMESPACE_TAG, SECRET_NAME_TAG, make_descriptor


class TestExtractTags:
    def test_extracts_name_namespaces_and_no_filename(self, run_config):
        descriptor = make_descriptor(secret_name="db-creds", namespace="prod staging")

        tags = extract_tags(descriptor, run_config)

        assert tags.secret_name == "db-creds"
        assert tags.namespaces == ["prod", "staging"]
        assert tags.filename is None

    def test_extracts_filename_when_tagged(self, run_config):
        descriptor = make_descriptor(secret_name="db-creds", namespace="prod", filename="env")

        assert extract_tags(descriptor, run_config).filename == "env"

    def test_missing_secret_name_tag_raises(self, run_config):
        descriptor = make_descriptor(namespace="prod")

        with pytest.raises(MissingTag) as excinfo:
            extract_tags(descriptor, run_config)
        assert excinfo.value.tag_key == SECRET_NAME_TAG

    def test_missing_namespace_tag_raises(self, run_config):
        descriptor = make_descriptor(secret_name="db-creds")

        with pytest.raises(MissingTag) as excinfo:
            extract_tags(descriptor, run_config)
        assert excinfo.value.tag_key == NAMESPACE_TAG

    def test_unrelated_tags_are_ignored(self, run_config):
        descriptor = make_descriptor(secret_name="db-creds", namespace="prod", team="payments")

        tags = extract_tags(descriptor, run_config)

        assert tags.secret_name == "db-creds"
        assert tags.namespaces == ["prod"]


class TestGetNamespaces:
    def test_splits_on_single_spaces(self):
        descriptor = make_descriptor(namespace="a b c")

        assert get_namespaces(descriptor, NAMESPACE_TAG) == ["a", "b", "c"]

    def test_double_space_yields_empty_token(self):
        descriptor = make_descriptor(namespace="a  b")

        assert get_namespaces(descriptor, NAMESPACE_TAG) == ["a", "", "b"]

    def test_duplicates_are_kept_in_order(self):
        descriptor = make_descriptor(namespace="prod prod dev")

        assert get_namespaces(descriptor, NAMESPACE_TAG) == ["prod", "prod", "dev"]


class TestDuplicateKeys:
    def test_first_matching_tag_wins(self):
        descriptor = SecretDescriptor(
            identifier="arn:1",
            name="dup",
            tags=(
                Tag(key=SECRET_NAME_TAG, value="first"),
                Tag(key=SECRET_NAME_TAG, value="second"),
            ),
        )

        assert get_secret_name(descriptor, SECRET_NAME_TAG) == "first"

    def test_filename_absent_is_none(self):
        assert get_filename(make_descriptor(), FILENAME_TAG) is None
