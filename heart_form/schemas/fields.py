from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Value submitted for this choice")
    label: str = Field(..., description="Human readable choice label")


class NumericKind(BaseModel):
    """Free-form numeric text input, range checked only on submit"""
    model_config = ConfigDict(frozen=True)

    type: Literal["numeric"] = "numeric"
    unit: Optional[str] = None


class EnumeratedKind(BaseModel):
    """Input restricted to an ordered set of coded choices"""
    model_config = ConfigDict(frozen=True)

    type: Literal["enumerated"] = "enumerated"
    choices: List[Choice]

    @property
    def codes(self) -> List[str]:
        return [choice.code for choice in self.choices]

    def label_for(self, code: str) -> str:
        for choice in self.choices:
            if choice.code == code:
                return choice.label
        raise KeyError(code)


FieldKind = Annotated[Union[NumericKind, EnumeratedKind], Field(discriminator="type")]


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Identifier used in the request payload")
    label: str
    min_value: float = Field(..., description="Inclusive lower bound")
    max_value: float = Field(..., description="Inclusive upper bound")
    kind: FieldKind
    help_text: Optional[str] = None


def _choices(*pairs) -> EnumeratedKind:
    return EnumeratedKind(choices=[Choice(code=code, label=label) for code, label in pairs])


FIELD_SPECS: List[FieldSpec] = [
    FieldSpec(key="age", label="Age", min_value=18, max_value=100, kind=NumericKind(unit="years")),
    FieldSpec(
        key="sex", label="Sex", min_value=0, max_value=1,
        kind=_choices(("0", "Female"), ("1", "Male")),
        help_text="0 = Female, 1 = Male",
    ),
    FieldSpec(
        key="cp", label="Chest Pain Type", min_value=0, max_value=3,
        kind=_choices(
            ("0", "Typical Angina"),
            ("1", "Atypical Angina"),
            ("2", "Non-anginal Pain"),
            ("3", "Asymptomatic"),
        ),
        help_text="0 = Typical angina, 1 = Atypical angina, 2 = Non-anginal pain, 3 = Asymptomatic",
    ),
    FieldSpec(
        key="trestbps", label="Resting Blood Pressure", min_value=90, max_value=200,
        kind=NumericKind(unit="mm Hg"), help_text="mm Hg",
    ),
    FieldSpec(
        key="chol", label="Cholesterol", min_value=120, max_value=570,
        kind=NumericKind(unit="mg/dl"), help_text="mg/dl",
    ),
    FieldSpec(
        key="fbs", label="Fasting Blood Sugar", min_value=0, max_value=1,
        kind=_choices(("0", "≤ 120 mg/dl"), ("1", "> 120 mg/dl")),
        help_text="0 = ≤ 120 mg/dl, 1 = > 120 mg/dl",
    ),
    FieldSpec(
        key="restecg", label="Resting ECG", min_value=0, max_value=2,
        kind=_choices(
            ("0", "Normal"),
            ("1", "ST-T Wave Abnormality"),
            ("2", "Left Ventricular Hypertrophy"),
        ),
        help_text="0 = Normal, 1 = ST-T wave abnormality, 2 = Left ventricular hypertrophy",
    ),
    FieldSpec(key="thalach", label="Max Heart Rate", min_value=60, max_value=220, kind=NumericKind(unit="bpm")),
    FieldSpec(
        key="exang", label="Exercise Induced Angina", min_value=0, max_value=1,
        kind=_choices(("0", "No"), ("1", "Yes")),
        help_text="0 = No, 1 = Yes",
    ),
    FieldSpec(
        key="oldpeak", label="ST Depression", min_value=0, max_value=5,
        kind=_choices(*[(str(i), str(i)) for i in range(6)]),
    ),
    FieldSpec(
        key="slope", label="ST Slope", min_value=0, max_value=2,
        kind=_choices(("0", "Upsloping"), ("1", "Flat"), ("2", "Downsloping")),
        help_text="0 = Upsloping, 1 = Flat, 2 = Downsloping",
    ),
    FieldSpec(
        key="ca", label="Number of Major Vessels", min_value=0, max_value=3,
        kind=_choices(*[(str(i), str(i)) for i in range(4)]),
    ),
    FieldSpec(
        key="thal", label="Thalassemia", min_value=0, max_value=3,
        kind=_choices(
            ("0", "Normal"),
            ("1", "Fixed Defect"),
            ("2", "Reversible Defect"),
            ("3", "Unknown"),
        ),
        help_text="0 = Normal, 1 = Fixed defect, 2 = Reversible defect, 3 = Not available",
    ),
]

FIELDS_BY_KEY: Dict[str, FieldSpec] = {spec.key: spec for spec in FIELD_SPECS}

FormState = Dict[str, str]


def new_form_state() -> FormState:
    """Return a fresh form state with every field empty"""
    return {spec.key: "" for spec in FIELD_SPECS}
