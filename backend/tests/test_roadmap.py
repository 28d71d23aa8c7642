"""
Roadmap composer tests: template dispatch, durations, milestones and profile checks.
"""

import math
import unittest

from codepath.errors import ProfileValidationError
from codepath.roadmap import RoadmapComposer, is_full_time, primary_interest, validate_profile
from codepath.schemas import UserProfile


WEB_TITLES = [
    "Web Development Fundamentals",
    "HTML & CSS Mastery",
    "JavaScript Fundamentals",
    "Interactive Web Projects",
    "Modern Frontend Framework",
    "Backend Basics",
]
DATA_SCIENCE_TITLES = ["Python Programming Basics", "Data Analysis Libraries", "Statistics & Mathematics"]
MOBILE_TITLES = ["Mobile Development Fundamentals", "React Native Basics"]
DEFAULT_TITLES = ["Programming Fundamentals", "Choose Your Language"]


def make_profile(**overrides) -> UserProfile:
    data = {
        "name": "Ada",
        "experience": "complete-beginner",
        "interests": ["Web Development"],
        "goals": ["get a job", "build projects"],
        "timeCommitment": "Part-time, 2 hours/day",
        "preferredLearning": [],
        "background": "",
    }
    data.update(overrides)
    return UserProfile.model_validate(data)


class TestTemplateSelection(unittest.TestCase):
    def setUp(self):
        self.composer = RoadmapComposer()

    def titles(self, roadmap):
        return [step.title for step in roadmap.steps]

    def test_example_profile(self):
        roadmap = self.composer.compose(make_profile())
        self.assertEqual(roadmap.total_duration, "6-8 months")
        self.assertEqual(roadmap.difficulty, "Beginner-Friendly")
        self.assertEqual(len(roadmap.steps), 6)
        self.assertEqual(roadmap.title, "Web Development Learning Path for Ada")
        self.assertEqual(
            roadmap.description,
            "Personalized web development roadmap designed for complete-beginner level, "
            "focusing on get a job and build projects",
        )

    def test_known_interests_use_their_templates(self):
        cases = {
            "Web Development": WEB_TITLES,
            "Data Science": DATA_SCIENCE_TITLES,
            "Mobile Apps": MOBILE_TITLES,
        }
        for interest, titles in cases.items():
            with self.subTest(interest=interest):
                roadmap = self.composer.compose(make_profile(interests=[interest]))
                self.assertEqual(self.titles(roadmap), titles)

    def test_other_interests_fall_back_to_default(self):
        for interest in ["", "Game Development", "web development", " Web Development", "Cybersecurity"]:
            with self.subTest(interest=interest):
                roadmap = self.composer.compose(make_profile(interests=[interest]))
                self.assertEqual(self.titles(roadmap), DEFAULT_TITLES)

    def test_only_first_interest_counts(self):
        roadmap = self.composer.compose(make_profile(interests=["Game Development", "Web Development"]))
        self.assertEqual(self.titles(roadmap), DEFAULT_TITLES)

    def test_empty_primary_interest_reads_as_programming(self):
        profile = make_profile(interests=[""])
        self.assertEqual(primary_interest(profile), "Programming")
        roadmap = self.composer.compose(profile)
        self.assertEqual(roadmap.title, "Programming Learning Path for Ada")

    def test_react_interest_focuses_framework_step(self):
        generic = self.composer.compose(make_profile())
        react = self.composer.compose(make_profile(interests=["Web Development", "React"]))
        self.assertEqual(react.steps[4].description, "Learn React.js")
        self.assertNotEqual(generic.steps[4].description, "Learn React.js")
        self.assertEqual(self.titles(react), WEB_TITLES)

    def test_steps_start_incomplete(self):
        roadmap = self.composer.compose(make_profile())
        self.assertTrue(all(step.is_completed is False for step in roadmap.steps))
        self.assertEqual([step.id for step in roadmap.steps], ["1", "2", "3", "4", "5", "6"])

    def test_web_development_steps_carry_learning_resources(self):
        roadmap = self.composer.compose(make_profile())
        for step in roadmap.steps:
            self.assertIsNotNone(step.learning_resources)
            self.assertGreaterEqual(len(step.resources), 4)
        data_science = self.composer.compose(make_profile(interests=["Data Science"]))
        self.assertTrue(all(step.learning_resources is None for step in data_science.steps))


class TestDurationAndDifficulty(unittest.TestCase):
    def setUp(self):
        self.composer = RoadmapComposer()

    def test_full_time_markers(self):
        for commitment in ["Full-time (8+ hours/day)", "Full-time", "8+ hours", "about 8+"]:
            with self.subTest(commitment=commitment):
                self.assertTrue(is_full_time(commitment))
                roadmap = self.composer.compose(make_profile(timeCommitment=commitment))
                self.assertEqual(roadmap.total_duration, "3-4 months")

    def test_part_time_and_case_sensitivity(self):
        for commitment in ["", "1-2 hours/day", "full-time", "FULL-TIME", "8 hours"]:
            with self.subTest(commitment=commitment):
                self.assertFalse(is_full_time(commitment))
                roadmap = self.composer.compose(make_profile(timeCommitment=commitment))
                self.assertEqual(roadmap.total_duration, "6-8 months")

    def test_difficulty_label(self):
        self.assertEqual(self.composer.compose(make_profile(experience="some-coding")).difficulty, "Progressive")
        self.assertEqual(self.composer.compose(make_profile(experience="career-change")).difficulty, "Progressive")

    def test_description_uses_first_two_goals(self):
        roadmap = self.composer.compose(make_profile(goals=["a", "b", "c"]))
        self.assertTrue(roadmap.description.endswith("focusing on a and b"))
        single = self.composer.compose(make_profile(goals=["only"]))
        self.assertTrue(single.description.endswith("focusing on only"))


class TestMilestones(unittest.TestCase):
    def setUp(self):
        self.composer = RoadmapComposer()

    def test_milestone_count_is_half_the_steps_rounded_up(self):
        for interest in ["Web Development", "Data Science", "Mobile Apps", "Other"]:
            with self.subTest(interest=interest):
                roadmap = self.composer.compose(make_profile(interests=[interest]))
                self.assertEqual(len(roadmap.milestones), math.ceil(len(roadmap.steps) / 2))

    def test_web_development_milestone_skills(self):
        roadmap = self.composer.compose(make_profile())
        self.assertEqual([m.week for m in roadmap.milestones], [4, 8, 12])
        self.assertEqual(roadmap.milestones[0].skills, ["HTML", "CSS", "Semantic HTML", "CSS Grid"])
        self.assertEqual(roadmap.milestones[1].skills, ["Variables", "Functions", "API Integration", "Local Storage"])
        self.assertEqual(roadmap.milestones[2].skills, ["React Components", "State Management", "Node.js", "Express.js"])

    def test_short_roadmaps_degrade_gracefully(self):
        roadmap = self.composer.compose(make_profile(interests=["Data Science"]))
        self.assertEqual(roadmap.milestones[1].skills, ["Descriptive Statistics", "Probability"])

        steps = self.composer.compose(make_profile(interests=["Mobile Apps"])).steps
        milestones = RoadmapComposer.milestones_for(steps)
        self.assertEqual(len(milestones), 1)
        self.assertEqual(milestones[0].title, "Foundation Complete")

    def test_custom_templates(self):
        composer = RoadmapComposer(
            templates={},
            default_steps=[
                {"id": "1", "title": "Only", "description": "d", "duration": "1 week",
                 "difficulty": "beginner", "type": "theory", "skills": ["x", "y", "z"]},
            ],
        )
        roadmap = composer.compose(make_profile())
        self.assertEqual([s.title for s in roadmap.steps], ["Only"])
        self.assertEqual(len(roadmap.milestones), 1)
        self.assertEqual(roadmap.milestones[0].skills, ["x", "y"])


class TestPurity(unittest.TestCase):
    def test_compose_is_idempotent(self):
        composer = RoadmapComposer()
        profile = make_profile(interests=["Web Development", "React"])
        self.assertEqual(composer.compose(profile), composer.compose(profile))

    def test_results_do_not_share_state(self):
        composer = RoadmapComposer()
        first = composer.compose(make_profile())
        first.steps[0].skills.append("Mutated")
        first.steps[0].is_completed = True
        second = composer.compose(make_profile())
        self.assertNotIn("Mutated", second.steps[0].skills)
        self.assertFalse(second.steps[0].is_completed)


class TestProfileValidation(unittest.TestCase):
    def test_complete_profile_passes(self):
        validate_profile(make_profile())

    def test_missing_fields_are_rejected(self):
        for overrides in [{"name": ""}, {"name": None}, {"interests": []}, {"goals": []}]:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ProfileValidationError) as ctx:
                    validate_profile(make_profile(**overrides))
                self.assertEqual(ctx.exception.message, "Missing required profile information")
                self.assertEqual(ctx.exception.status_code, 400)


if __name__ == "__main__":
    unittest.main()
