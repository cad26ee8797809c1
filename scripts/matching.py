#!/usr/bin/env python3
"""
Demo script for talent recommendations.
Parses plain text resumes into profiles and ranks them for a posting.
"""

import argparse
import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def load_candidates(resumes_dir):
    """Parse every .txt resume in a directory into a candidate profile."""
    from talentmatch.data.models import CandidateProfile
    from talentmatch.nlp import get_resume_parser

    parser = get_resume_parser()
    candidates = []

    resume_files = sorted(resumes_dir.glob("*.txt"))
    print(f"\nFound {len(resume_files)} resumes")

    for i, resume_path in enumerate(resume_files, 1):
        parsed = parser.parse(resume_path.read_text(encoding="utf-8"))
        print(f"  [{i}/{len(resume_files)}] {resume_path.name[:45]}: {len(parsed.skills)} skills")
        if parsed.skills:
            candidates.append(CandidateProfile.from_parsed_resume(resume_path.stem, parsed))

    return candidates


def main():
    parser = argparse.ArgumentParser(description="Talent Recommendation Demo")
    parser.add_argument("--posting", type=Path, required=True, help="Posting JSON file")
    parser.add_argument("--resumes-dir", type=Path,
                       default=project_root / "data" / "resumes")

    args = parser.parse_args()

    print("\n" + "="*60)
    print("talentmatch: Talent Recommendations")
    print("="*60)

    from talentmatch.core.matching import get_matching_engine
    from talentmatch.data.models import PostingRequirement

    posting = PostingRequirement.model_validate(json.loads(args.posting.read_text(encoding="utf-8")))
    print(f"Posting: {posting.title or posting.id}")
    print(f"Skills required: {', '.join(posting.required_skills)}")

    candidates = load_candidates(args.resumes_dir)
    results = get_matching_engine().recommend(posting, candidates)

    print(f"\n{'Rank':<5} {'Candidate':<25} {'Score':<7} {'Skills':<7} {'Matched'}")
    print("-"*60)

    for i, r in enumerate(results, 1):
        print(f"{i:<5} {str(r.candidate_id)[:24]:<25} {r.final_score:<7} {r.skill_match_score:<7} {', '.join(r.matched_skills)}")

    if not results:
        print("No candidate passed the relevance floor.")


if __name__ == "__main__":
    main()
