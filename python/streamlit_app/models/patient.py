"""Patient record model.

This module defines the Patient dataclass built from entries of the patient
store. Records come from an externally owned JSON file, so every field other
than the id is optional and values are kept exactly as loaded: a wrong type
(say a numeric first name) is left for the consumer to detect.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from utils.helpers import calculate_age, display_value


@dataclass(frozen=True)
class Patient:
    """A single patient entry of the patient store.

    Attributes:
        id: Record identifier, unique within a loaded collection
        pid: Patient identifier shown to users
        firstname: Given name
        lastname: Family name
        sex: Biological sex code
        birthday: Birth date as stored
        creationdate: Creation timestamp as stored
        raw: The untouched source mapping
    """

    id: Any
    pid: Optional[Any] = None
    firstname: Optional[Any] = None
    lastname: Optional[Any] = None
    sex: Optional[Any] = None
    birthday: Optional[Any] = None
    creationdate: Optional[Any] = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Patient":
        """Build a Patient from a store entry (`_id` wins over `id`)."""
        record_id = data.get('_id')
        if record_id is None:
            record_id = data.get('id')
        return cls(
            id=record_id,
            pid=data.get('pid'),
            firstname=data.get('firstname'),
            lastname=data.get('lastname'),
            sex=data.get('sex'),
            birthday=data.get('birthday'),
            creationdate=data.get('creationdate'),
            raw=dict(data),
        )

    @property
    def full_name(self) -> str:
        parts = [display_value(self.firstname), display_value(self.lastname)]
        return " ".join(p for p in parts if p)

    @property
    def age(self) -> Optional[int]:
        return calculate_age(self.birthday)

    def to_display_row(self) -> Dict[str, Any]:
        """Row for the patient selection table"""
        age = self.age
        return {
            'First Name': display_value(self.firstname),
            'Last Name': display_value(self.lastname),
            'Patient ID': display_value(self.pid),
            'Gender': display_value(self.sex),
            'Age': age if age is not None else "",
        }
