"""Tests for the synthetic patient store generator."""

import json

from data_generation.generate_patient_store import PatientStoreGenerator
from services.patient_loader import PatientLoader


class TestPatientStoreGenerator:
    def test_count_and_fields(self):
        patients = PatientStoreGenerator(seed=1, incomplete_rate=0).generate_patients(20)
        assert len(patients) == 20
        assert patients[0]["pid"] == "P000001"
        for patient in patients:
            assert set(patient) == {"_id", "pid", "firstname", "lastname", "sex", "birthday", "creationdate"}
            assert patient["sex"] in ("M", "F")
        assert len({p["_id"] for p in patients}) == 20

    def test_same_seed_same_records(self):
        first = PatientStoreGenerator(seed=7).generate_patients(10)
        second = PatientStoreGenerator(seed=7).generate_patients(10)
        keys = ("_id", "pid", "firstname", "sex")
        assert [[p[k] for k in keys] for p in first] == [[p[k] for k in keys] for p in second]

    def test_incomplete_records(self):
        patients = PatientStoreGenerator(seed=3, incomplete_rate=1).generate_patients(5)
        assert all("creationdate" not in p for p in patients)
        assert all(p["lastname"] is None for p in patients)

    def test_written_store_loads(self, tmp_path):
        generator = PatientStoreGenerator(seed=5)
        out_file = generator.write_store(generator.generate_patients(15), str(tmp_path / "server"))

        assert out_file.name == "patient.json"
        assert len(json.loads(out_file.read_text(encoding="utf-8"))) == 15
        assert len(PatientLoader().load(str(out_file.parent))) == 15
