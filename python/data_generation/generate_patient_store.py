#!/usr/bin/env python3
"""
Mediview Patient Directory - Patient Store Generator

Generates a synthetic patient store (a JSON array of patient records) for
trying the directory screen without real clinical data. A small share of
records is left incomplete so that the screen's handling of missing
creation dates and names can be seen.
"""

import argparse
import json
import random
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List

from faker import Faker


class PatientStoreGenerator:
    """Generate patient store records in the Mediview JSON format."""

    def __init__(self, seed: int = 42, incomplete_rate: float = 0.03):
        """Initialize generator with consistent seed for reproducible data."""
        self.random = random.Random(seed)
        self.fake = Faker()
        Faker.seed(seed)
        self.incomplete_rate = incomplete_rate

    def generate_patients(self, count: int) -> List[Dict]:
        """Generate patient records, oldest creation date first."""
        patients = []

        for i in range(count):
            sex = self.random.choice(['M', 'F'])
            age_days = self.random.randint(0, 95 * 365)
            birthday = datetime.now(timezone.utc).date() - timedelta(days=age_days)
            created = self.fake.date_time_between(start_date='-5y', end_date='now', tzinfo=timezone.utc)

            patient = {
                '_id': uuid.UUID(int=self.random.getrandbits(128)).hex[:24],
                'pid': f"P{i + 1:06d}",
                'firstname': self.fake.first_name_male() if sex == 'M' else self.fake.first_name_female(),
                'lastname': self.fake.last_name(),
                'sex': sex,
                'birthday': birthday.isoformat(),
                'creationdate': created.isoformat(),
            }

            if self.random.random() < self.incomplete_rate:
                del patient['creationdate']
            if self.random.random() < self.incomplete_rate:
                patient['lastname'] = None

            patients.append(patient)

        return patients

    def write_store(self, patients: List[Dict], output_dir: str,
                    filename: str = "patient.json") -> Path:
        """Write the records as the patient store file under output_dir."""
        out_dir = Path(output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file = out_dir / filename
        with open(out_file, 'w', encoding='utf-8') as f:
            json.dump(patients, f, ensure_ascii=False, indent=2)
        return out_file


def main():
    """Main function to run data generation."""
    parser = argparse.ArgumentParser(description="Generate a Mediview patient store")
    parser.add_argument("--patients", type=int, default=200,
                        help="Number of patients to generate (default: 200)")
    parser.add_argument("--output-dir", type=str, default="data/server",
                        help="Server directory to write patient.json into")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed for reproducible data generation")
    parser.add_argument("--incomplete-rate", type=float, default=0.03,
                        help="Share of records with missing fields (default: 0.03)")

    args = parser.parse_args()

    generator = PatientStoreGenerator(seed=args.seed, incomplete_rate=args.incomplete_rate)
    patients = generator.generate_patients(args.patients)
    out_file = generator.write_store(patients, args.output_dir)

    print(f"Wrote {len(patients)} patients to {out_file.absolute()}")
    print(f"Set the server path to {out_file.parent.absolute()} in the app")


if __name__ == "__main__":
    main()
