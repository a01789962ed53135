#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for InlineOptions."""

from dataclasses import FrozenInstanceError, fields
from pathlib import Path

import pytest

from inlinemail.constants import DEFAULT_MAX_ASSET_SIZE_BYTES
from inlinemail.options import InlineOptions


@pytest.mark.unit
class TestInlineOptions:
    """Test option defaults, validation and cloning."""

    def test_defaults(self):
        options = InlineOptions()

        assert options.base_dir is None
        assert options.cid_prefix == "img"
        assert options.hash_algorithm == "sha256"
        assert options.max_asset_size_bytes == DEFAULT_MAX_ASSET_SIZE_BYTES
        assert options.fail_on_resource_errors is False

    def test_frozen(self):
        options = InlineOptions()

        with pytest.raises(FrozenInstanceError):
            options.cid_prefix = "pic"

    def test_create_updated(self):
        options = InlineOptions()

        updated = options.create_updated(cid_prefix="pic", fail_on_resource_errors=True)

        assert updated.cid_prefix == "pic"
        assert updated.fail_on_resource_errors is True
        assert options.cid_prefix == "img"
        assert options.fail_on_resource_errors is False

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            InlineOptions().create_updated(max_asset_size_bytes=0)

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_max_asset_size(self, size):
        with pytest.raises(ValueError, match="max_asset_size_bytes"):
            InlineOptions(max_asset_size_bytes=size)

    @pytest.mark.parametrize("prefix", ["", "1img", "img 1", "img\n", "img/", "cid:img"])
    def test_invalid_cid_prefix(self, prefix):
        with pytest.raises(ValueError, match="cid_prefix"):
            InlineOptions(cid_prefix=prefix)

    @pytest.mark.parametrize("prefix", ["pic", "inline-img.", "Image_"])
    def test_valid_cid_prefix(self, prefix):
        assert InlineOptions(cid_prefix=prefix).cid_prefix == prefix

    @pytest.mark.parametrize("algorithm", ["nope", "shake_128", ""])
    def test_invalid_hash_algorithm(self, algorithm):
        with pytest.raises(ValueError, match="hash_algorithm"):
            InlineOptions(hash_algorithm=algorithm)

    @pytest.mark.parametrize("algorithm", ["md5", "sha1", "sha512", "blake2b"])
    def test_valid_hash_algorithm(self, algorithm):
        assert InlineOptions(hash_algorithm=algorithm).hash_algorithm == algorithm

    def test_resolve_base_dir_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert InlineOptions().resolve_base_dir() == Path.cwd()

    def test_resolve_relative_base_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert InlineOptions(base_dir="images").resolve_base_dir() == Path.cwd() / "images"

    def test_resolve_absolute_base_dir(self, tmp_path):
        assert InlineOptions(base_dir=str(tmp_path)).resolve_base_dir() == tmp_path

    def test_every_field_has_help(self):
        for field in fields(InlineOptions):
            assert field.metadata.get("help"), field.name
