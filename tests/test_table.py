"""Tests for case-folding table parsing and lookup."""

import pytest

from caseless.config import FoldingOptions
from caseless.errors import CaseFoldingDataError
from caseless.table import (
    CaseFoldingEntry,
    CaseFoldingTable,
    CaseStatus,
    data_version,
    default_table,
    parse_case_folding,
)

SIMPLE = FoldingOptions(use_full_mapping=False)
TURKIC = FoldingOptions(use_turkic_mapping=True)
SIMPLE_TURKIC = FoldingOptions(use_full_mapping=False, use_turkic_mapping=True)

SAMPLE = """\
# CaseFolding-9.8.7.txt
# comment line

0041; C; 0061; # LATIN CAPITAL LETTER A
0049; C; 0069; # LATIN CAPITAL LETTER I
0049; T; 0131; # LATIN CAPITAL LETTER I
00DF; F; 0073 0073; # LATIN SMALL LETTER SHARP S
1E9E; F; 0073 0073; # LATIN CAPITAL LETTER SHARP S
1E9E; S; 00DF; # LATIN CAPITAL LETTER SHARP S
""".splitlines()


class TestParsing:
    def test_rows_and_version(self):
        entries, version = parse_case_folding(SAMPLE)
        assert version == (9, 8, 7)
        assert len(entries) == 6
        assert entries[0] == CaseFoldingEntry(0x41, CaseStatus.COMMON, (0x61,))
        assert entries[3] == CaseFoldingEntry(0xDF, CaseStatus.FULL, (0x73, 0x73))

    def test_no_header(self):
        entries, version = parse_case_folding(["0041; C; 0061;"])
        assert version is None
        assert len(entries) == 1

    def test_unknown_status(self):
        with pytest.raises(CaseFoldingDataError, match="line 2: unknown status 'X'"):
            parse_case_folding(["# header", "0041; X; 0061;"])

    def test_bad_hex(self):
        with pytest.raises(CaseFoldingDataError, match="line 1: bad hex"):
            parse_case_folding(["00G1; C; 0061;"])

    def test_missing_fields(self):
        with pytest.raises(CaseFoldingDataError, match="line 1"):
            parse_case_folding(["0041; C"])

    def test_common_mapping_too_long(self):
        with pytest.raises(CaseFoldingDataError, match="at most 1"):
            parse_case_folding(["0041; C; 0061 0062;"])

    def test_full_mapping_too_long(self):
        with pytest.raises(CaseFoldingDataError, match="at most 3"):
            parse_case_folding(["0041; F; 0061 0062 0063 0064;"])

    def test_out_of_range(self):
        with pytest.raises(CaseFoldingDataError):
            parse_case_folding(["110000; C; 0061;"])

    def test_zero_target(self):
        with pytest.raises(CaseFoldingDataError, match="invalid code point"):
            parse_case_folding(["0041; C; 0000;"])

    def test_entry_coerces_status_and_mapping(self):
        entry = CaseFoldingEntry(0x41, "C", [0x61])
        assert entry.status is CaseStatus.COMMON
        assert entry.mapping == (0x61,)
        assert hash(entry) == hash(CaseFoldingEntry(0x41, CaseStatus.COMMON, (0x61,)))

    def test_entry_plain_status_mapping_too_long(self):
        with pytest.raises(CaseFoldingDataError, match="at most 1"):
            CaseFoldingEntry(0x41, "C", [0x61, 0x62])

    def test_entry_unknown_status(self):
        with pytest.raises(CaseFoldingDataError, match="unknown status 'X'"):
            CaseFoldingEntry(0x41, "X", (0x61,))


class TestInvariants:
    def test_duplicate_status(self):
        with pytest.raises(CaseFoldingDataError, match="duplicate common entry"):
            CaseFoldingTable.from_lines(["0041; C; 0061;", "0041; C; 0062;"])

    def test_common_excludes_full(self):
        with pytest.raises(CaseFoldingDataError, match="common entry alongside"):
            CaseFoldingTable.from_lines(["0041; C; 0061;", "0041; F; 0061 0061;"])

    def test_common_excludes_simple(self):
        with pytest.raises(CaseFoldingDataError, match="common entry alongside"):
            CaseFoldingTable.from_lines(["0041; S; 0061;", "0041; C; 0061;"])

    def test_full_simple_and_turkic_together(self):
        table = CaseFoldingTable.from_lines(["0130; F; 0069 0307;", "0130; S; 0069;", "0130; T; 0069;"])
        assert [e.status for e in table.entries_for(0x130)] == [
            CaseStatus.FULL,
            CaseStatus.SIMPLE,
            CaseStatus.TURKIC,
        ]


class TestLookup:
    @pytest.fixture
    def table(self):
        return CaseFoldingTable.from_lines(SAMPLE)

    def test_common(self, table):
        assert table.lookup(0x41) == (0x61,)
        assert table.lookup(0x41, SIMPLE) == (0x61,)

    def test_full_preferred(self, table):
        assert table.lookup(0x1E9E) == (0x73, 0x73)
        assert table.lookup(0x1E9E, SIMPLE) == (0xDF,)

    def test_full_only_row_is_identity_in_simple_mode(self, table):
        assert table.lookup(0xDF) == (0x73, 0x73)
        assert table.lookup(0xDF, SIMPLE) == (0xDF,)

    def test_turkic_overrides_common(self, table):
        assert table.lookup(0x49) == (0x69,)
        assert table.lookup(0x49, TURKIC) == (0x131,)
        assert table.lookup(0x49, SIMPLE_TURKIC) == (0x131,)

    def test_unmapped_is_identity(self, table):
        assert table.lookup(0x61) == (0x61,)
        assert table.lookup(0x10FFFF, TURKIC) == (0x10FFFF,)

    def test_container_protocol(self, table):
        assert len(table) == 4
        assert 0x1E9E in table
        assert 0x61 not in table
        assert [e.source for e in table] == [0x41, 0x49, 0x49, 0xDF, 0x1E9E, 0x1E9E]

    def test_from_file(self, tmp_path):
        path = tmp_path / "CaseFolding.txt"
        path.write_text("\n".join(SAMPLE), encoding="utf-8")
        table = CaseFoldingTable.from_file(path)
        assert table.unicode_version == (9, 8, 7)
        assert table.lookup(0x1E9E, SIMPLE) == (0xDF,)


class TestDefaultTable:
    def test_loaded_once(self):
        assert default_table() is default_table()

    def test_version(self):
        assert default_table().unicode_version == (14, 0, 0)

    def test_status_counts(self):
        counts = default_table().status_counts()
        assert counts == {
            CaseStatus.COMMON: 1426,
            CaseStatus.FULL: 104,
            CaseStatus.SIMPLE: 28,
            CaseStatus.TURKIC: 2,
        }

    def test_dotted_capital_i(self):
        table = default_table()
        assert table.lookup(0x130) == (0x69, 0x307)
        assert table.lookup(0x130, TURKIC) == (0x69,)
        # No simple row exists for U+0130.
        assert table.lookup(0x130, SIMPLE) == (0x130,)

    def test_greek_sigmas_converge(self):
        table = default_table()
        assert table.lookup(0x3A3) == table.lookup(0x3C2) == (0x3C3,)

    @pytest.mark.parametrize("options", [FoldingOptions(), SIMPLE, TURKIC, SIMPLE_TURKIC])
    def test_every_mapping_is_a_fixed_point(self, options):
        table = default_table()
        for entry in table:
            folded = table.lookup(entry.source, options)
            refolded = tuple(cp for f in folded for cp in table.lookup(f, options))
            assert refolded == folded, f"U+{entry.source:04X}"


def test_package_exports_data_version():
    import caseless

    assert caseless.UNICODE_VERSION == (14, 0, 0)
    assert caseless.default_table() is default_table()


def test_data_version_reads_header_without_building_table():
    default_table.cache_clear()
    assert data_version() == (14, 0, 0)
    assert default_table.cache_info().currsize == 0
    assert default_table().unicode_version == data_version()


class TestTranslationMaps:
    def test_read_only(self):
        with pytest.raises(TypeError):
            default_table().translation()[ord("A")] = "z"

    def test_fold_unaffected_by_write_attempt(self):
        from caseless.folding import fold

        translation = default_table().translation(SIMPLE)
        with pytest.raises(TypeError):
            del translation[ord("A")]
        assert fold("A", SIMPLE) == "a"
        assert fold("A") == "a"
