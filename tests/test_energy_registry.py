"""
Tests for energy term base classes and the energy term registry.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from regkit.energy import (
    EnergyCategory,
    EnergyMeasure,
    EnergyTerm,
    ImageSimilarity,
    PointSetDistance,
    TransformationConstraint,
    get_energy_term_class,
    get_energy_term_info,
    list_energy_terms,
    list_energy_terms_with_info,
    new_energy_term,
    register_energy_term,
    unregister_energy_term,
)
from regkit.energy import registry
from regkit.object import insert
from regkit.strings import parse_int


@pytest.fixture(autouse=True)
def empty_registry(monkeypatch):
    """Run every test with an empty registry."""
    monkeypatch.setattr(registry, "_ENERGY_TERM_REGISTRY", {})


def make_classes():
    """Define and register a few energy terms."""

    @register_energy_term()
    class NormalizedCrossCorrelation(ImageSimilarity):
        """Local normalized cross-correlation."""

        measure = EnergyMeasure.LNCC

        def __init__(self, name="", weight=1.0):
            super().__init__(name, weight)
            self.window = 5

        def set(self, name, value):
            if name == "Window size":
                window, ok = parse_int(value)
                if ok and window > 0:
                    self.window = window
                    return True
                return False
            return super().set(name, value)

        def parameter(self):
            params = super().parameter()
            insert(params, "Window size", self.window)
            return params

    @register_energy_term()
    class FiducialRegistrationError(PointSetDistance):
        """Fiducial registration error."""

        measure = EnergyMeasure.FRE

    @register_energy_term(EnergyMeasure.BENDING_ENERGY)
    class BendingEnergy(TransformationConstraint):
        """Thin-plate spline bending energy."""

    return NormalizedCrossCorrelation, FiducialRegistrationError, BendingEnergy


class TestEnergyTerm:
    """Test the parameters shared by all energy terms."""

    def test_base_classes_are_abstract(self):
        for cls in (EnergyTerm, ImageSimilarity, PointSetDistance):
            with pytest.raises(TypeError):
                cls()

    def test_category_of_base_classes(self):
        assert EnergyTerm.category is None
        assert ImageSimilarity.category is EnergyCategory.SIMILARITY
        assert TransformationConstraint.category is EnergyCategory.TRANSFORMATION_CONSTRAINT

    def test_default_parameters(self):
        ncc_cls, _, _ = make_classes()
        term = ncc_cls()

        assert term.parameter() == [("Name", ""), ("Weight", "1"), ("Window size", "5")]
        assert term.name_of_class() == "NormalizedCrossCorrelation"

    def test_set_weight(self):
        ncc_cls, _, _ = make_classes()
        term = ncc_cls()

        assert term.set("Weight", "0.25")
        assert term.weight == 0.25
        assert not term.set("Weight", "heavy")
        assert term.weight == 0.25

    def test_prefix(self):
        ncc_cls, _, _ = make_classes()
        term = ncc_cls()
        assert term.prefix == "LNCC"

        term.set("Name", "Image")
        assert term.prefix == "Image"

    def test_round_trip(self):
        ncc_cls, _, _ = make_classes()
        term = ncc_cls("Similarity", 0.5)
        term.set("Window size", "7")
        params = term.parameter()

        copy = ncc_cls()
        copy.apply_parameters(params)

        assert copy.parameter() == params
        assert copy.window == 7


class TestRegistration:
    """Test registering energy term classes."""

    def test_registered(self):
        make_classes()

        assert list_energy_terms() == ["BE", "FRE", "LNCC"]

    def test_measure_override_sets_class_measure(self):
        _, _, be_cls = make_classes()

        assert be_cls.measure is EnergyMeasure.BENDING_ENERGY

    def test_register_same_class_twice(self):
        ncc_cls, _, _ = make_classes()

        assert register_energy_term()(ncc_cls) is ncc_cls
        assert len(list_energy_terms()) == 3

    def test_register_duplicate_measure(self):
        make_classes()

        with pytest.raises(ValueError, match="already registered"):
            @register_energy_term()
            class OtherNCC(ImageSimilarity):
                measure = EnergyMeasure.LNCC

    def test_register_class_for_second_measure(self):
        @register_energy_term(EnergyMeasure.SSD)
        class Similarity(ImageSimilarity):
            """Some similarity measure."""

        with pytest.raises(ValueError, match="already registered as energy term 'SSD'"):
            register_energy_term(EnergyMeasure.NMI)(Similarity)

        assert Similarity.measure is EnergyMeasure.SSD
        assert get_energy_term_info(EnergyMeasure.SSD)["name"] == "SSD"
        assert list_energy_terms() == ["SSD"]

    def test_register_subclass_of_registered_class(self):
        @register_energy_term(EnergyMeasure.SSD)
        class Similarity(ImageSimilarity):
            pass

        @register_energy_term(EnergyMeasure.NMI)
        class Normalized(Similarity):
            pass

        assert get_energy_term_class("SSD") is Similarity
        assert get_energy_term_class("NMI") is Normalized
        assert Similarity.measure is EnergyMeasure.SSD

    def test_register_sentinel(self):
        with pytest.raises(ValueError, match="not a selectable"):
            @register_energy_term(EnergyMeasure.SIM_BEGIN)
            class Broken(ImageSimilarity):
                pass

    def test_register_unknown(self):
        with pytest.raises(ValueError):
            @register_energy_term()
            class Broken(ImageSimilarity):
                pass

    def test_register_wrong_category(self):
        with pytest.raises(ValueError, match="similarity"):
            @register_energy_term(EnergyMeasure.SSD)
            class Broken(TransformationConstraint):
                pass

    def test_unregister(self):
        make_classes()

        cls = unregister_energy_term("Landmark error")
        assert cls.__name__ == "FiducialRegistrationError"
        assert list_energy_terms() == ["BE", "LNCC"]

        with pytest.raises(KeyError):
            unregister_energy_term(EnergyMeasure.FRE)


class TestLookup:
    """Test looking up and instantiating energy terms."""

    def test_lookup_by_measure_name_and_alias(self):
        ncc_cls, _, _ = make_classes()

        assert get_energy_term_class(EnergyMeasure.LNCC) is ncc_cls
        assert get_energy_term_class("LNCC") is ncc_cls
        assert get_energy_term_class("NCC") is ncc_cls
        assert get_energy_term_class("LCC") is ncc_cls

    def test_lookup_unknown_name(self):
        make_classes()

        with pytest.raises(KeyError, match="Available: BE, FRE, LNCC"):
            get_energy_term_class("not-a-real-name")

    def test_lookup_unregistered_measure(self):
        make_classes()

        with pytest.raises(KeyError):
            get_energy_term_class("SSD")

    def test_new_energy_term(self):
        make_classes()
        term = new_energy_term("Fiducial registration error")

        assert term.measure is EnergyMeasure.FRE
        assert term.name_of_class() == "FiducialRegistrationError"

    def test_new_energy_term_with_parameters(self):
        make_classes()
        term = new_energy_term("NCC", [("Weight", "2"), ("Unknown", "1"), ("Window size", "3")])

        assert term.weight == 2.0
        assert term.window == 3

    def test_info(self):
        make_classes()
        info = get_energy_term_info("NCC")

        assert info["name"] == "LNCC"
        assert info["category"] == "similarity"
        assert info["aliases"] == "NCC, LCC"
        assert info["description"] == "Local normalized cross-correlation."
        assert info["module"].endswith(".NormalizedCrossCorrelation")

    def test_list_with_info(self):
        make_classes()
        infos = list_energy_terms_with_info()

        assert [info["name"] for info in infos] == ["BE", "FRE", "LNCC"]
