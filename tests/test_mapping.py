import logging

from pollution_catalog.constants import (
    DETECTOR_CLASSES,
    DETECTOR_IGNORED_CLASSES,
    DETECTOR_POLLUTION_CLASSES,
    OBJECT_TO_CATEGORY,
    PollutionCategory,
)
from pollution_catalog.mapping import dominant_category, is_people_dominated, map_detections, map_label
from pollution_catalog.models import DetectionInput


def test_map_label_is_case_insensitive() -> None:
    assert map_label("BOTTLE") is PollutionCategory.PLASTIC
    assert map_label("Wine Glass") is PollutionCategory.DEBRIS
    assert map_label("boat") is PollutionCategory.FISHING_GEAR


def test_map_label_unknown_returns_none() -> None:
    assert map_label("person") is None
    assert map_label("jellyfish") is None
    assert map_label("") is None


def test_map_detections_aggregates_and_drops_unmapped() -> None:
    counts = map_detections({"bottle": 2, "cup": 1, "banana": 3, "person": 4, "dog": 1})
    assert counts == {PollutionCategory.PLASTIC: 3, PollutionCategory.DEBRIS: 3}


def test_map_detections_empty() -> None:
    assert map_detections({}) == {}


def test_label_table_matches_detector_vocabulary() -> None:
    # Every litter class the detector emits must map, and nothing else may.
    assert set(OBJECT_TO_CATEGORY) == set(DETECTOR_POLLUTION_CLASSES)
    assert not DETECTOR_IGNORED_CLASSES & DETECTOR_POLLUTION_CLASSES
    for label in DETECTOR_IGNORED_CLASSES:
        assert map_label(label) is None


def test_label_tables_use_detector_class_names() -> None:
    # a misspelled or renamed class would never be emitted by the model
    assert len(DETECTOR_CLASSES) == 80
    assert len(set(DETECTOR_CLASSES)) == len(DETECTOR_CLASSES)
    model_classes = set(DETECTOR_CLASSES)
    assert set(OBJECT_TO_CATEGORY) <= model_classes
    assert DETECTOR_IGNORED_CLASSES <= model_classes


def test_labels_outside_detector_vocabulary_are_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pollution_catalog.mapping"):
        assert map_detections({"hairdryer": 2, "chair": 1}) == {}
    logged = [r.label for r in caplog.records if r.getMessage() == "Label outside detector vocabulary"]
    assert logged == ["hairdryer"]


def test_label_table_keys_are_lowercase() -> None:
    assert all(label == label.lower() for label in OBJECT_TO_CATEGORY)


def test_fishing_gear_accepts_camel_case_alias() -> None:
    assert PollutionCategory("fishingGear") is PollutionCategory.FISHING_GEAR
    assert PollutionCategory("fishing_gear") is PollutionCategory.FISHING_GEAR
    assert PollutionCategory.FISHING_GEAR.display_label == "Fishing Gear"


def test_dominant_category() -> None:
    assert dominant_category({PollutionCategory.DEBRIS: 4, PollutionCategory.PLASTIC: 2}) is PollutionCategory.DEBRIS
    # ties resolve in category order
    assert dominant_category({PollutionCategory.DEBRIS: 3, PollutionCategory.PLASTIC: 3}) is PollutionCategory.PLASTIC
    assert dominant_category({}) is None
    assert dominant_category({PollutionCategory.OIL: 0}) is None


def test_is_people_dominated() -> None:
    crowded = DetectionInput(raw_label_counts={"bottle": 2}, people_count=5)
    litter = DetectionInput(raw_label_counts={"bottle": 2}, people_count=1)
    assert is_people_dominated(crowded) is True
    assert is_people_dominated(litter) is False
    assert is_people_dominated(DetectionInput()) is False
