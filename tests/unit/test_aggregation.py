"""Tests for aggregation formulas."""

from app.services.statistics import aggregation


class TestRoundHalfUp:
    def test_half_goes_up(self):
        assert aggregation.round_half_up(2.5) == 3
        assert aggregation.round_half_up(86.5) == 87

    def test_below_half(self):
        assert aggregation.round_half_up(86.49) == 86

    def test_digits(self):
        assert aggregation.round_half_up(91.666, 2) == 91.67
        assert aggregation.round_half_up(0.125, 2) == 0.13

    def test_integer_result(self):
        assert isinstance(aggregation.round_half_up(86.67), int)


class TestEnrollment:
    def test_empty(self):
        result = aggregation.aggregate_enrollment([])
        assert result["totalStudents"] == 0
        assert result["genderDistribution"] == {"boys": 0, "girls": 0}

    def test_none_input(self):
        assert aggregation.aggregate_enrollment(None)["totalStudents"] == 0

    def test_sums(self):
        rows = [
            {"totalStudents": 100, "boys": 52, "girls": 48, "specialBoys": 2, "specialGirls": 3},
            {"totalStudents": 60, "boys": 30, "girls": 30},
        ]
        result = aggregation.aggregate_enrollment(rows)
        assert result["totalStudents"] == 160
        assert result["genderDistribution"] == {"boys": 82, "girls": 78}
        assert result["specialNeeds"] == {"boys": 2, "girls": 3, "total": 5}

    def test_sparse_rows(self):
        rows = [
            {"totalStudents": 100, "boys": 50, "girls": 50},
            {"totalStudents": None, "girls": 7},
            {},
        ]
        result = aggregation.aggregate_enrollment(rows)
        assert result["totalStudents"] == 100
        assert result["genderDistribution"] == {"boys": 50, "girls": 57}

    def test_snake_case_fields(self):
        result = aggregation.aggregate_enrollment([{"total_students": 40, "boys": 20, "girls": 20}])
        assert result["totalStudents"] == 40


class TestStudentAttendance:
    def test_rounds_to_whole_percent(self):
        rows = [{"totalEnrolled": 100, "totalPresent": 80}, {"totalEnrolled": 50, "totalPresent": 50}]
        assert aggregation.aggregate_student_attendance(rows) == {
            "totalEnrolled": 150,
            "totalPresent": 130,
            "attendanceRate": 87,
        }

    def test_zero_enrolled(self):
        result = aggregation.aggregate_student_attendance([{"totalEnrolled": 0, "totalPresent": 0}])
        assert result["attendanceRate"] == 0

    def test_empty(self):
        assert aggregation.aggregate_student_attendance([]) == {
            "totalEnrolled": 0,
            "totalPresent": 0,
            "attendanceRate": 0,
        }

    def test_sparse_rows(self):
        rows = [
            {"totalEnrolled": 100, "totalPresent": 80},
            {"totalEnrolled": None},
            {"totalPresent": None},
        ]
        result = aggregation.aggregate_student_attendance(rows)
        assert result["totalEnrolled"] == 100
        assert result["totalPresent"] == 80
        assert result["attendanceRate"] == 80


class TestTeacherAttendance:
    def test_rates(self):
        rows = [
            {"totalTeachers": 2, "sessionDays": 10, "daysPresent": 9, "daysPunctual": 8,
             "exercisesGiven": 20, "exercisesMarked": 18},
            {"totalTeachers": 1, "sessionDays": 5, "daysPresent": 3, "daysPunctual": 3,
             "exercisesGiven": 0, "exercisesMarked": 0},
        ]
        result = aggregation.aggregate_teacher_attendance(rows)
        assert result["totalTeachers"] == 3
        assert result["attendanceRate"] == 80.0
        assert result["punctualityRate"] == 91.67
        assert result["exerciseCompletionRate"] == 90.0

    def test_total_is_sum_of_rows(self):
        rows = [{"totalTeachers": 12}, {"totalTeachers": 8}, {}]
        assert aggregation.aggregate_teacher_attendance(rows)["totalTeachers"] == 20

    def test_empty(self):
        result = aggregation.aggregate_teacher_attendance([])
        assert result == {
            "totalTeachers": 0,
            "attendanceRate": 0,
            "punctualityRate": 0,
            "exerciseCompletionRate": 0,
        }

    def test_zero_denominators(self):
        result = aggregation.aggregate_teacher_attendance([{"totalTeachers": 1, "daysPunctual": 3}])
        assert result["attendanceRate"] == 0
        assert result["punctualityRate"] == 0


class TestLessonPlanQuality:
    def test_none(self):
        assert aggregation.lesson_plan_quality([]) is None

    def test_distribution(self):
        result = aggregation.lesson_plan_quality(["good", "Excellent", None, "unknown"])
        assert result["good"] == {"count": 1, "percentage": 25.0}
        assert result["excellent"]["count"] == 1
        assert result["not_rated"]["count"] == 2
        assert result["poor"] == {"count": 0, "percentage": 0.0}


class TestGroupPeriods:
    def test_empty(self):
        assert aggregation.group_periods([]) == []

    def test_ordering(self):
        rows = [
            {"year": 2024, "term": 1, "week": 2},
            {"year": 2024, "term": 1, "week": 1},
            {"year": 2024, "term": 2, "week": 1},
            {"year": 2023, "term": 3, "week": 5},
        ]
        assert aggregation.group_periods(rows) == [
            {"year": 2024, "terms": [{"term": 2, "weeks": [1]}, {"term": 1, "weeks": [1, 2]}]},
            {"year": 2023, "terms": [{"term": 3, "weeks": [5]}]},
        ]

    def test_week_number_field(self):
        result = aggregation.group_periods([{"year": 2024, "term": 1, "week_number": 4}])
        assert result[0]["terms"][0]["weeks"] == [4]
