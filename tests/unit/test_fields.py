import pytest

from heart_form.schemas.fields import (
    FIELD_SPECS,
    FIELDS_BY_KEY,
    EnumeratedKind,
    NumericKind,
    new_form_state,
)
from heart_form.schemas.prediction.requests.prediction_request import PredictionRequest

EXPECTED_RANGES = {
    "age": (18, 100),
    "sex": (0, 1),
    "cp": (0, 3),
    "trestbps": (90, 200),
    "chol": (120, 570),
    "fbs": (0, 1),
    "restecg": (0, 2),
    "thalach": (60, 220),
    "exang": (0, 1),
    "oldpeak": (0, 5),
    "slope": (0, 2),
    "ca": (0, 3),
    "thal": (0, 3),
}


class TestFieldSpecs:
    def test_thirteen_fields_in_fixed_order(self):
        assert [spec.key for spec in FIELD_SPECS] == list(EXPECTED_RANGES)
        assert len(FIELDS_BY_KEY) == 13

    def test_declared_ranges(self):
        for spec in FIELD_SPECS:
            assert (spec.min_value, spec.max_value) == EXPECTED_RANGES[spec.key]

    def test_request_schema_matches_field_ranges(self):
        schema = PredictionRequest.model_json_schema()

        assert list(schema["properties"]) == [spec.key for spec in FIELD_SPECS]
        for spec in FIELD_SPECS:
            prop = schema["properties"][spec.key]
            assert prop["minimum"] == spec.min_value
            assert prop["maximum"] == spec.max_value

    def test_numeric_fields(self):
        numeric = [spec.key for spec in FIELD_SPECS if spec.kind.type == "numeric"]

        assert numeric == ["age", "trestbps", "chol", "thalach"]
        assert all(isinstance(FIELDS_BY_KEY[key].kind, NumericKind) for key in numeric)

    @pytest.mark.parametrize(
        "spec",
        [spec for spec in FIELD_SPECS if spec.kind.type == "enumerated"],
        ids=lambda spec: spec.key,
    )
    def test_enumerated_choices_cover_the_range(self, spec):
        assert isinstance(spec.kind, EnumeratedKind)
        codes = [float(code) for code in spec.kind.codes]
        assert codes == sorted(codes)
        assert codes[0] == spec.min_value
        assert codes[-1] == spec.max_value

    def test_label_for(self):
        kind = FIELDS_BY_KEY["thal"].kind

        assert kind.label_for("2") == "Reversible Defect"
        with pytest.raises(KeyError):
            kind.label_for("9")

    def test_new_form_state_is_empty_and_fresh(self):
        first = new_form_state()
        second = new_form_state()

        assert first == {spec.key: "" for spec in FIELD_SPECS}
        first["age"] = "40"
        assert second["age"] == ""
