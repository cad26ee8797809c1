"""
Tests for talentmatch.cli — typer commands driven through CliRunner.
"""

import json

import pytest
from typer.testing import CliRunner

from talentmatch.cli import app

runner = CliRunner()


@pytest.fixture
def posting_file(tmp_path):
    path = tmp_path / "posting.json"
    path.write_text(
        json.dumps(
            {
                "_id": "p1",
                "title": "Mobile App",
                "requiredSkills": ["JavaScript", "React", "SQL"],
                "budget": {"min": 15, "max": 30},
            }
        )
    )
    return path


@pytest.fixture
def candidates_file(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "A",
                    "skills": ["javascript", "react", "sql"],
                    "availability": "available",
                    "hourlyRate": 20,
                    "experienceEntries": [1, 2],
                    "isEmailVerified": False,
                },
                {"id": "B", "skills": ["java"], "availability": "available"},
                {
                    "_id": "C",
                    "role": "talent",
                    "isEmailVerified": True,
                    "talentProfile": {"skills": ["react", "sql"], "availability": "busy"},
                },
            ]
        )
    )
    return path


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "talentmatch" in result.output
        assert "0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Fuzzy Threshold" in result.output


class TestScoringCommands:
    def test_similarity(self):
        result = runner.invoke(app, ["similarity", "kitten", "sitting"])
        assert result.exit_code == 0
        assert "0.571" in result.output

    def test_score(self):
        result = runner.invoke(app, ["score", "-r", "React,Node.js,Python", "-s", "react,node.js"])
        assert result.exit_code == 0
        assert "67%" in result.output
        assert "medium" in result.output


class TestRecommendCommand:
    def test_json_output(self, posting_file, candidates_file):
        result = runner.invoke(app, ["recommend", str(posting_file), str(candidates_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [r["candidate_id"] for r in data] == ["A", "C"]
        assert data[0]["final_score"] == 100
        assert data[0]["rate_compatibility"] == 10
        assert data[1]["skill_match_score"] == 67

    def test_verified_only(self, posting_file, candidates_file):
        result = runner.invoke(
            app, ["recommend", str(posting_file), str(candidates_file), "--verified-only", "--json"]
        )
        assert result.exit_code == 0
        assert [r["candidate_id"] for r in json.loads(result.stdout)] == ["C"]

    def test_verified_only_with_shared_id(self, tmp_path, posting_file):
        candidates = tmp_path / "shared.json"
        candidates.write_text(
            json.dumps(
                [
                    {"id": "X", "skills": ["react"], "isEmailVerified": True},
                    {"id": "X", "skills": ["javascript", "react", "sql"], "isEmailVerified": False},
                ]
            )
        )
        result = runner.invoke(
            app, ["recommend", str(posting_file), str(candidates), "--verified-only", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 1
        assert data[0]["skill_match_score"] == 33

    def test_table_output(self, posting_file, candidates_file):
        result = runner.invoke(app, ["recommend", str(posting_file), str(candidates_file)])
        assert result.exit_code == 0
        assert "Mobile App" in result.output

    def test_no_recommendations(self, tmp_path, posting_file):
        candidates = tmp_path / "none.json"
        candidates.write_text(json.dumps([{"id": "B", "skills": ["cobol"]}]))
        result = runner.invoke(app, ["recommend", str(posting_file), str(candidates)])
        assert result.exit_code == 0
        assert "No recommendations" in result.output

    def test_invalid_json(self, tmp_path, posting_file):
        broken = tmp_path / "broken.json"
        broken.write_text("{not json")
        result = runner.invoke(app, ["recommend", str(posting_file), str(broken)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_record(self, tmp_path, posting_file):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps([{"id": "A", "availability": "on_leave"}]))
        result = runner.invoke(app, ["recommend", str(posting_file), str(bad)])
        assert result.exit_code == 1

    def test_non_object_record(self, tmp_path, posting_file):
        bad = tmp_path / "scalars.json"
        bad.write_text(json.dumps([5]))
        result = runner.invoke(app, ["recommend", str(posting_file), str(bad)])
        assert result.exit_code == 1
        assert "must be a JSON object" in result.output

    def test_missing_file(self, tmp_path, posting_file):
        result = runner.invoke(app, ["recommend", str(posting_file), str(tmp_path / "missing.json")])
        assert result.exit_code == 1


class TestPostingsCommand:
    def test_json_output(self, tmp_path):
        postings = tmp_path / "postings.json"
        postings.write_text(
            json.dumps(
                [
                    {"id": "p2", "title": "Data", "requiredSkills": ["Python", "Flask"]},
                    {"id": "p1", "title": "Web", "requiredSkills": ["Python", "Django"]},
                ]
            )
        )
        result = runner.invoke(app, ["postings", "python,django", str(postings), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [(p["posting_id"], p["match_score"], p["badge"]) for p in data] == [
            ("p1", 100, "high"),
            ("p2", 50, "medium"),
        ]

    def test_not_a_list(self, tmp_path):
        postings = tmp_path / "postings.json"
        postings.write_text(json.dumps({"id": "p1"}))
        result = runner.invoke(app, ["postings", "python", str(postings)])
        assert result.exit_code == 1


class TestParseResumeCommand:
    def test_skills_listed(self, tmp_path):
        resume = tmp_path / "cv.txt"
        resume.write_text("Senior engineer: Python, Django, Docker")
        result = runner.invoke(app, ["parse-resume", str(resume)])
        assert result.exit_code == 0
        assert "Python, Django, Docker" in result.output

    def test_no_skills(self, tmp_path):
        resume = tmp_path / "cv.txt"
        resume.write_text("Gardener")
        result = runner.invoke(app, ["parse-resume", str(resume)])
        assert result.exit_code == 0
        assert "No known skills" in result.output
