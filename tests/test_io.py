# -*- coding: utf-8 -*-
"""Tests for saving and loading datum parameter files."""

import orjson
import pytest

from geodatum_lib.context import TransformContext
from geodatum_lib.datum import DEFAULT_TRANSFORMS
from geodatum_lib.enums import Datum
from geodatum_lib.enums import ErrorCode
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.errors import UnsupportedFormatError
from geodatum_lib.io import TransformEntry
from geodatum_lib.io import dump_transforms
from geodatum_lib.io import load_transforms
from geodatum_lib.io import save_transforms
from geodatum_lib.models import DatumTransform


class TestDump:
    """Tests for serializing the transformation table."""

    def test_only_explicit_directions(self, ctx):
        data = orjson.loads(dump_transforms(ctx))
        assert len(data) == len(DEFAULT_TRANSFORMS)
        pairs = {(entry["from"], entry["to"]) for entry in data}
        assert ("Tokyo", "WGS 1984") in pairs
        assert ("WGS 1984", "Tokyo") not in pairs

    def test_entry_layout(self, bare_ctx):
        bare_ctx.set_transform_params(
            Datum.EUROPEAN_1950, Datum.WGS_1984, DatumTransform(dx=-87.0)
        )
        assert orjson.loads(dump_transforms(bare_ctx)) == [
            {
                "from": "European 1950",
                "to": "WGS 1984",
                "params": {
                    "dx": -87.0,
                    "dy": 0.0,
                    "dz": 0.0,
                    "rx": 0.0,
                    "ry": 0.0,
                    "rz": 0.0,
                    "scale": 0.0,
                },
            }
        ]

    def test_empty_table(self, bare_ctx):
        assert orjson.loads(dump_transforms(bare_ctx)) == []


class TestSaveLoad:
    """Tests for the file round trip."""

    def test_round_trip(self, ctx, bare_ctx, tmp_path):
        path = tmp_path / "transforms.json"
        save_transforms(ctx, path)

        assert load_transforms(bare_ctx, path) == len(DEFAULT_TRANSFORMS)
        for src, dst, params in DEFAULT_TRANSFORMS:
            assert bare_ctx.get_transform_params(src, dst) == params
            assert bare_ctx.get_transform_params(dst, src) == ctx.get_transform_params(
                dst, src
            )

    def test_load_accepts_loose_datum_names(self, bare_ctx, tmp_path):
        path = tmp_path / "transforms.json"
        path.write_bytes(
            orjson.dumps(
                [{"from": "tokyo", "to": "wgs  1984", "params": {"dx": -148.0}}]
            )
        )
        assert load_transforms(bare_ctx, path) == 1
        assert bare_ctx.get_transform_params(Datum.WGS_1984, Datum.TOKYO).dx == 148.0

    def test_later_entries_win(self, bare_ctx, tmp_path):
        path = tmp_path / "transforms.json"
        path.write_bytes(
            orjson.dumps(
                [
                    {"from": "Tokyo", "to": "WGS 1984", "params": {"dx": 1.0}},
                    {"from": "WGS 1984", "to": "Tokyo", "params": {"dx": 2.0}},
                ]
            )
        )
        load_transforms(bare_ctx, path)
        assert len(bare_ctx.transforms) == 1
        assert bare_ctx.get_transform_params(Datum.TOKYO, Datum.WGS_1984).dx == -2.0

    @pytest.mark.parametrize(
        "content",
        [
            b"not json",
            b'{"from": "Tokyo"}',
            b'[{"from": "Tokyo", "to": "WGS 1984"}]',
            b'[{"from": "Mars 2000", "to": "WGS 1984", "params": {}}]',
            b'[{"from": "Tokyo", "to": "WGS 1984", "params": {"dx": "far"}}]',
        ],
    )
    def test_invalid_file(self, ctx, observer, tmp_path, content):
        path = tmp_path / "transforms.json"
        path.write_bytes(content)
        with pytest.raises(UnsupportedFormatError):
            load_transforms(ctx, path)
        assert observer.codes == [ErrorCode.UNSUPPORTED_FORMAT]

    def test_same_datum_entry(self, bare_ctx, tmp_path):
        path = tmp_path / "transforms.json"
        path.write_bytes(
            orjson.dumps([{"from": "Tokyo", "to": "Tokyo", "params": {"dx": 1.0}}])
        )
        with pytest.raises(InvalidInputError):
            load_transforms(bare_ctx, path)

    def test_rejected_file_leaves_table_unchanged(self, bare_ctx, tmp_path):
        bare_ctx.set_transform_params(
            Datum.EUROPEAN_1950, Datum.WGS_1984, DatumTransform(dx=-87.0)
        )
        path = tmp_path / "transforms.json"
        path.write_bytes(
            orjson.dumps(
                [
                    {"from": "WGS 1984", "to": "Tokyo", "params": {"dx": 148.0}},
                    {"from": "Tokyo", "to": "Tokyo", "params": {"dx": 1.0}},
                ]
            )
        )
        with pytest.raises(InvalidInputError):
            load_transforms(bare_ctx, path)
        assert len(bare_ctx.transforms) == 1
        assert bare_ctx.get_transform_params(Datum.WGS_1984, Datum.TOKYO).dx == 0.0

    def test_missing_file(self, ctx, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_transforms(ctx, tmp_path / "missing.json")

    def test_closed_context(self, tmp_path):
        context = TransformContext()
        context.close()
        with pytest.raises(InvalidInputError):
            save_transforms(context, tmp_path / "transforms.json")


class TestTransformEntry:
    """Tests for the entry model."""

    def test_populate_by_field_name(self):
        entry = TransformEntry(
            from_datum="Tokyo", to_datum="WGS 1984", params=DatumTransform()
        )
        assert entry.from_datum is Datum.TOKYO
        assert entry.to_datum is Datum.WGS_1984
