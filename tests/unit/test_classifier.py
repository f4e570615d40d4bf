# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from projinfo.classifier import (
    ClassificationInput,
    ValidityClassifier,
    check_duplicate_guid,
    check_exclude_flag,
    check_files_to_analyze,
    check_invalid_guid,
)
from projinfo.grouping import group_records
from projinfo.path_aggregator import PathAggregator, select_representative


def _candidate(records) -> ClassificationInput:
    (group,) = group_records(records)
    representative = select_representative(group.records)
    return ClassificationInput(
        project=group,
        representative=representative,
        paths=PathAggregator().aggregate(group, representative),
    )


def test_cls_001_valid_project_passes_every_check(make_record) -> None:
    candidate = _candidate([make_record(), make_record(target_framework="net46")])

    assert ValidityClassifier().classify(candidate) == "valid"


def test_cls_002_duplicate_identity_wins_over_every_other_check(make_record) -> None:
    candidate = _candidate(
        [
            make_record(identity=None, source_path="path1", exclude_flag=True, files=[]),
            make_record(identity=None, source_path="path2", files=[]),
        ]
    )

    assert check_duplicate_guid(candidate) == "duplicate_guid"
    assert ValidityClassifier().classify(candidate) == "duplicate_guid"


def test_cls_003_missing_identity_is_invalid_before_exclusion(make_record) -> None:
    candidate = _candidate([make_record(identity=None, exclude_flag=True)])

    assert check_invalid_guid(candidate) == "invalid_guid"
    assert ValidityClassifier().classify(candidate) == "invalid_guid"


def test_cls_004_single_excluded_record_excludes_the_project(make_record) -> None:
    candidate = _candidate([make_record(exclude_flag=True, files=[])])

    assert ValidityClassifier().classify(candidate) == "exclude_flag_set"


def test_cls_005_one_excluded_variant_excludes_the_whole_group(make_record) -> None:
    candidate = _candidate(
        [make_record(), make_record(target_framework="net46", exclude_flag=True)]
    )

    assert check_exclude_flag(candidate) == "exclude_flag_set"


def test_cls_006_no_files_to_analyze_even_with_analyzer_settings(make_record) -> None:
    candidate = _candidate(
        [make_record(files=[], settings=[("sonar.cs.analyzer.projectOutPaths", "out")])]
    )

    assert check_files_to_analyze(candidate) == "no_files_to_analyze"
    assert ValidityClassifier().classify(candidate) == "no_files_to_analyze"


def test_cls_007_language_check_runs_after_identity_checks(make_record) -> None:
    classifier = ValidityClassifier(supported_languages=frozenset({"cs"}))

    assert classifier.classify(_candidate([make_record(language="vbnet")])) == (
        "unsupported_language"
    )
    assert classifier.classify(_candidate([make_record(language="CS")])) == "valid"
    assert classifier.classify(
        _candidate([make_record(identity=None, language="vbnet")])
    ) == "invalid_guid"


def test_cls_008_custom_check_chain_is_applied_in_order(make_record) -> None:
    candidate = _candidate([make_record(exclude_flag=True, files=[])])
    classifier = ValidityClassifier(checks=(check_files_to_analyze, check_exclude_flag))

    assert classifier.classify(candidate) == "no_files_to_analyze"


def test_cls_009_language_check_follows_identity_checks_in_custom_chain(make_record) -> None:
    excluded_vb = _candidate([make_record(language="vbnet", exclude_flag=True)])
    unnamed_vb = _candidate([make_record(identity=None, language="vbnet")])
    classifier = ValidityClassifier(
        checks=(check_exclude_flag, check_invalid_guid, check_files_to_analyze),
        supported_languages=frozenset({"cs"}),
    )

    assert classifier.classify(excluded_vb) == "exclude_flag_set"
    assert classifier.classify(unnamed_vb) == "invalid_guid"
    assert classifier.classify(_candidate([make_record(language="vbnet")])) == (
        "unsupported_language"
    )


def test_cls_010_language_check_leads_a_chain_without_identity_checks(make_record) -> None:
    candidate = _candidate([make_record(language="vbnet", exclude_flag=True)])
    classifier = ValidityClassifier(
        checks=(check_exclude_flag,), supported_languages=frozenset({"cs"})
    )

    assert classifier.classify(candidate) == "unsupported_language"
