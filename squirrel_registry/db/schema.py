# squirrel_registry/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, Date, Text, CheckConstraint
)

metadata = MetaData()

sightings = Table(
    "sightings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("location", Text, nullable=False),
    Column("date_spotted", Date, nullable=False),
    CheckConstraint("length(trim(name)) > 0", name="ck_sightings_name_nonempty"),
    CheckConstraint("length(trim(description)) > 0", name="ck_sightings_description_nonempty"),
    CheckConstraint("length(trim(location)) > 0", name="ck_sightings_location_nonempty"),
)
