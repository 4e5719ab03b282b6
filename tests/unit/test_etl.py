"""Tests for CSV loading and period validation."""

import duckdb
import polars as pl
import pytest

from app.models.statistics import EntityType, StatsFilter
from app.repositories.hierarchy import HierarchyRepository
from app.repositories.statistics import StatsRepository
from etl import DATASETS, load_frame, load_submissions, read_csv, validate_period
from etl.helpers import conform


def write_csv(tmp_path, name: str, text: str):
    path = tmp_path / name
    path.write_text(text.strip() + "\n")
    return path


@pytest.fixture
def hierarchy_csvs(tmp_path):
    return {
        "regions": write_csv(tmp_path, "regions.csv", "id,name\n1,Greater Accra"),
        "districts": write_csv(tmp_path, "districts.csv", "id,name,region_id\n10,Accra Metro,1"),
        "circuits": write_csv(tmp_path, "circuits.csv", "id,name,district_id,region_id\n100,Osu,10,1"),
        "schools": write_csv(
            tmp_path,
            "schools.csv",
            "id,name,circuit_id,district_id,region_id\n1000,Osu Presby Basic,100,10,1\n1001,Christiansborg Basic,100,10,1",
        ),
    }


class TestReadCsv:
    def test_conforms_columns(self, tmp_path):
        path = write_csv(
            tmp_path,
            "enrolment.csv",
            "week_number,school_id,total_population,year,term,extra\n1,1000,100,2024,1,x",
        )
        df = read_csv("enrolment", path)

        assert df.columns[:2] == ["school_id", "circuit_id"]
        assert "extra" not in df.columns
        assert df["circuit_id"].to_list() == [None]
        assert df["total_population"].to_list() == [100]

    def test_duplicate_keys_keep_last(self, tmp_path):
        path = write_csv(
            tmp_path,
            "enrolment.csv",
            "school_id,total_population,year,term,week_number\n1000,100,2024,1,1\n1000,105,2024,1,1\n1001,60,2024,1,1",
        )
        df = read_csv("enrolment", path)

        assert df.height == 2
        assert df.filter(df["school_id"] == 1000)["total_population"].to_list() == [105]

    def test_missing_columns(self, tmp_path):
        path = write_csv(tmp_path, "enrolment.csv", "school_id,year,term,week_number\n1000,2024,1,1")
        with pytest.raises(ValueError, match="missing columns total_population"):
            read_csv("enrolment", path)

    def test_unknown_kind(self, tmp_path):
        path = write_csv(tmp_path, "x.csv", "id\n1")
        with pytest.raises(ValueError, match="Unknown dataset"):
            read_csv("exams", path)


class TestLoadSubmissions:
    def test_hierarchy(self, conn, hierarchy_csvs):
        for kind in ("regions", "districts", "circuits", "schools"):
            load_submissions(conn, kind, hierarchy_csvs[kind])

        assert conn.execute("SELECT COUNT(*) FROM schools").fetchone()[0] == 2
        assert conn.execute("SELECT name FROM circuits WHERE id = 100").fetchone()[0] == "Osu"

    def test_backfills_hierarchy(self, seeded_conn, tmp_path):
        path = write_csv(
            tmp_path,
            "enrolment.csv",
            "school_id,normal_boys_total,normal_girls_total,total_population,year,term,week_number\n1010,20,22,42,2024,1,3",
        )
        assert load_submissions(seeded_conn, "enrolment", path) == 1

        row = seeded_conn.execute(
            "SELECT circuit_id, district_id, region_id, total_population FROM school_enrolment_totals "
            "WHERE school_id = 1010"
        ).fetchone()
        assert row == (101, 10, 1, 42)

    def test_resubmission_replaces(self, seeded_conn, tmp_path):
        path = write_csv(
            tmp_path,
            "enrolment.csv",
            "school_id,circuit_id,district_id,region_id,total_population,year,term,week_number\n1000,100,10,1,110,2024,1,1",
        )
        load_submissions(seeded_conn, "enrolment", path)

        rows = seeded_conn.execute(
            "SELECT total_population FROM school_enrolment_totals "
            "WHERE school_id = 1000 AND year = 2024 AND term = 1 AND week_number = 1"
        ).fetchall()
        assert rows == [(110,)]
        assert seeded_conn.execute("SELECT COUNT(*) FROM school_enrolment_totals").fetchone()[0] == 5

    def test_minimal_hierarchy_rolls_up(self, conn, tmp_path):
        files = {
            "regions": "id,name\n1,Greater Accra",
            "districts": "id,name,region_id\n10,Accra Metro,1",
            "circuits": "id,name,district_id\n100,Osu,10",
            "schools": "id,name,circuit_id\n1000,Osu Presby Basic,100",
        }
        for kind, text in files.items():
            load_submissions(conn, kind, write_csv(tmp_path, f"{kind}.csv", text))
        enrolment = write_csv(
            tmp_path,
            "enrolment.csv",
            "school_id,total_population,year,term,week_number\n1000,100,2024,1,1",
        )
        load_submissions(conn, "enrolment", enrolment)

        assert conn.execute("SELECT region_id FROM circuits WHERE id = 100").fetchone() == (1,)
        assert conn.execute("SELECT district_id, region_id FROM schools WHERE id = 1000").fetchone() == (10, 1)
        assert HierarchyRepository(conn).count_children(EntityType.REGION, 1) == {
            "districtCount": 1,
            "circuitCount": 1,
            "schoolCount": 1,
        }
        rows = StatsRepository(conn).enrolment_rows(StatsFilter(EntityType.DISTRICT, 10))
        assert [r["totalStudents"] for r in rows] == [100]

    def test_file_ids_win_over_parent(self, seeded_conn, tmp_path):
        path = write_csv(
            tmp_path,
            "schools.csv",
            "id,name,circuit_id,district_id,region_id\n1020,Labadi Presby,101,10,\n",
        )
        load_submissions(seeded_conn, "schools", path)

        row = seeded_conn.execute("SELECT district_id, region_id FROM schools WHERE id = 1020").fetchone()
        assert row == (10, 1)

    def test_failed_load_rolls_back(self, seeded_conn):
        df = conform(
            pl.DataFrame({"school_id": [None], "total_population": [5], "year": [2024], "term": [1], "week_number": [1]}),
            DATASETS["enrolment"].columns,
        )
        with pytest.raises(duckdb.Error):
            load_frame(seeded_conn, "enrolment", df)

        assert seeded_conn.execute("SELECT COUNT(*) FROM school_enrolment_totals").fetchone()[0] == 5
        with pytest.raises(duckdb.CatalogException):
            seeded_conn.execute("SELECT * FROM load_df")

    def test_teacher_attendance(self, seeded_conn, tmp_path):
        path = write_csv(
            tmp_path,
            "teachers.csv",
            "teacher_id,school_id,school_session_days,days_present,days_punctual,lesson_plan_ratings,year,term,week_number\n"
            "4,1010,5,5,5,fair,2024,1,1",
        )
        load_submissions(seeded_conn, "teacher_attendance", path)

        row = seeded_conn.execute(
            "SELECT circuit_id, lesson_plan_ratings FROM teacher_attendances WHERE teacher_id = 4"
        ).fetchone()
        assert row == (101, "fair")

    def test_unknown_school_still_loaded(self, seeded_conn, tmp_path):
        path = write_csv(
            tmp_path,
            "attendance.csv",
            "school_id,total_population,year,term,week_number\n5555,30,2024,1,1",
        )
        load_submissions(seeded_conn, "student_attendance", path)

        row = seeded_conn.execute(
            "SELECT circuit_id FROM school_student_attendance_totals WHERE school_id = 5555"
        ).fetchone()
        assert row == (None,)


class TestValidatePeriod:
    def test_clean_period(self, seeded_conn):
        result = validate_period(seeded_conn, 2024, 1)

        assert result["valid"] is True
        assert result["issues"] == []
        assert result["stats"] == {
            "enrolment_rows": 4,
            "schools_reporting": 3,
            "student_attendance_rows": 3,
            "teacher_rows": 3,
            "unknown_schools": 0,
        }

    def test_empty_period(self, seeded_conn):
        result = validate_period(seeded_conn, 2022, 1)

        assert result["valid"] is False
        assert result["issues"] == ["No enrolment submissions found"]

    def test_inconsistent_rows(self, seeded_conn):
        seeded_conn.execute(
            "INSERT INTO teacher_attendances (teacher_id, school_id, school_session_days, days_present, "
            "days_punctual, year, term, week_number) VALUES (9, 1000, 5, 3, 4, 2024, 1, 1)"
        )
        seeded_conn.execute(
            "INSERT INTO school_enrolment_totals (school_id, total_population, year, term, week_number) "
            "VALUES (5555, 10, 2024, 1, 1)"
        )
        result = validate_period(seeded_conn, 2024, 1)

        assert result["valid"] is False
        assert "1 teacher rows punctual more days than present" in result["issues"]
        assert "1 reporting schools missing from the hierarchy" in result["issues"]
        assert result["stats"]["unknown_schools"] == 1
