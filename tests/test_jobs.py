"""Tests for jobs module."""

import pytest
from pydantic import ValidationError

from xiv_lodestone.exceptions import ClassTypeParseError
from xiv_lodestone.jobs import ADVANCED_JOB_BASES, ClassInfo, ClassMap, ClassType, record_class


def test_class_type_parse_round_trip():
    for class_type in ClassType:
        assert ClassType.parse(str(class_type)) is class_type
        assert ClassType.parse(str(class_type).upper()) is class_type


def test_blue_mage_limited_job_suffix():
    assert ClassType.parse("Blue Mage (Limited Job)") is ClassType.BLUE_MAGE


def test_unknown_class_raises():
    with pytest.raises(ClassTypeParseError, match="Invalid class string 'Freelancer'"):
        ClassType.parse("Freelancer")


def test_advanced_jobs_have_nine_pairs():
    assert len(ADVANCED_JOB_BASES) == 9
    assert ClassType.PALADIN.base_class is ClassType.GLADIATOR
    assert ClassType.SUMMONER.base_class is ClassType.ARCANIST
    assert ClassType.DARK_KNIGHT.base_class is None
    assert ClassType.GLADIATOR.base_class is None


@pytest.mark.parametrize("advanced", list(ADVANCED_JOB_BASES))
def test_record_class_mirrors_advanced_job_onto_base(advanced):
    classes: ClassMap = {}
    info = ClassInfo(level=60, current_xp=100, max_xp=2000)

    record_class(classes, advanced, info)

    assert classes[advanced] == info
    assert classes[ADVANCED_JOB_BASES[advanced]] == info


def test_record_class_base_class_only_writes_itself():
    classes: ClassMap = {}
    info = ClassInfo(level=22, current_xp=0, max_xp=30600)

    record_class(classes, ClassType.GLADIATOR, info)

    assert classes == {ClassType.GLADIATOR: info}


def test_locked_job_keeps_earlier_base_class_progress():
    classes: ClassMap = {}
    gladiator = ClassInfo(level=22, current_xp=0, max_xp=30600)

    record_class(classes, ClassType.GLADIATOR, gladiator)
    record_class(classes, ClassType.PALADIN, None)

    assert classes[ClassType.GLADIATOR] == gladiator
    assert classes[ClassType.PALADIN] is None


def test_locked_job_before_base_class_row():
    classes: ClassMap = {}

    record_class(classes, ClassType.PALADIN, None)

    assert classes == {ClassType.GLADIATOR: None, ClassType.PALADIN: None}


def test_record_class_keeps_locked_jobs_as_none():
    classes: ClassMap = {}

    record_class(classes, ClassType.SCHOLAR, None)

    assert ClassType.SCHOLAR in classes
    assert classes[ClassType.SCHOLAR] is None


class TestClassInfo:
    def test_capped_class_has_no_experience(self):
        info = ClassInfo(level=100)
        assert info.current_xp is None
        assert info.max_xp is None

    def test_experience_must_come_in_pairs(self):
        with pytest.raises(ValidationError):
            ClassInfo(level=50, current_xp=10)

        with pytest.raises(ValidationError):
            ClassInfo(level=50, max_xp=10)

    def test_negative_level_rejected(self):
        with pytest.raises(ValidationError):
            ClassInfo(level=-1)
