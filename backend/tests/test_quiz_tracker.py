"""
Quiz tracker tests: history window, difficulty estimates and performance summaries.
"""

import unittest
from datetime import datetime, timedelta, timezone

from pydantic import ValidationError

from codepath.quiz_tracker import QuizTracker, consistency_score, learning_path, strong_areas, weak_areas
from codepath.schemas import QuizResult

NOW = datetime(2025, 1, 31, 12, 0, tzinfo=timezone.utc)


def result(score, total=10, days_ago=0, **extra):
    return QuizResult(
        score=score,
        total_questions=total,
        topic=extra.pop("topic", "Python"),
        language=extra.pop("language", "Python"),
        timestamp=NOW - timedelta(days=days_ago),
        **extra,
    )


class TestHistory(unittest.TestCase):
    def setUp(self):
        self.tracker = QuizTracker(max_history=3, clock=lambda: NOW)

    def test_history_is_capped(self):
        for score in range(5):
            self.tracker.save_result("ada", result(score))
        self.assertEqual([r.score for r in self.tracker.history("ada")], [2, 3, 4])

    def test_learners_are_isolated_and_clearable(self):
        self.tracker.save_result("ada", result(5))
        self.tracker.save_result("grace", result(7))
        self.tracker.clear("ada")
        self.assertEqual(self.tracker.history("ada"), [])
        self.assertEqual(len(self.tracker.history("grace")), 1)

    def test_least_recently_active_learner_is_evicted(self):
        tracker = QuizTracker(max_learners=2, clock=lambda: NOW)
        tracker.save_result("ada", result(5))
        tracker.save_result("grace", result(6))
        tracker.save_result("ada", result(7))
        tracker.save_result("linus", result(8))
        self.assertEqual(tracker.history("grace"), [])
        self.assertEqual([r.score for r in tracker.history("ada")], [5, 7])
        self.assertEqual(len(tracker.history("linus")), 1)

    def test_score_cannot_exceed_total(self):
        with self.assertRaises(ValidationError):
            result(11, total=10)

    def test_naive_timestamps_are_utc(self):
        r = QuizResult(score=1, total_questions=2, topic="t", language="l", timestamp=datetime(2025, 1, 1))
        self.assertEqual(r.timestamp.tzinfo, timezone.utc)


class TestEstimateDifficulty(unittest.TestCase):
    def setUp(self):
        self.tracker = QuizTracker(clock=lambda: NOW)

    def test_new_topic_is_beginner(self):
        self.assertEqual(self.tracker.estimate_difficulty("ada", "Python", "Python"), "beginner")

    def test_thresholds(self):
        cases = [(9, "advanced"), (8, "advanced"), (7, "intermediate"), (6, "intermediate"), (5, "beginner")]
        for score, expected in cases:
            with self.subTest(score=score):
                tracker = QuizTracker(clock=lambda: NOW)
                tracker.save_result("ada", result(score))
                self.assertEqual(tracker.estimate_difficulty("ada", "Python", "Python"), expected)

    def test_old_results_are_ignored(self):
        self.tracker.save_result("ada", result(10, days_ago=45))
        self.assertEqual(self.tracker.estimate_difficulty("ada", "Python", "Python"), "beginner")

    def test_other_topics_are_ignored(self):
        self.tracker.save_result("ada", result(10, topic="SQL"))
        self.assertEqual(self.tracker.estimate_difficulty("ada", "Python", "Python"), "beginner")


class TestPerformanceStats(unittest.TestCase):
    def setUp(self):
        self.tracker = QuizTracker(clock=lambda: NOW)

    def test_empty_stats(self):
        stats = self.tracker.performance_stats("ada", "Python", "Python")
        self.assertEqual(stats.total_quizzes, 0)
        self.assertEqual(stats.current_difficulty, "beginner")
        self.assertEqual(stats.last_quiz_date, "")

    def test_summary(self):
        # Saved out of order; stats work chronologically
        self.tracker.save_result("ada", result(9, days_ago=26, time_spent=40, streak_count=3))
        self.tracker.save_result("ada", result(5, days_ago=30, time_spent=100))
        self.tracker.save_result("ada", result(8, days_ago=28))

        stats = self.tracker.performance_stats("ada", "Python", "Python")
        self.assertEqual(stats.total_quizzes, 3)
        self.assertAlmostEqual(stats.average_score, 22 / 30)
        self.assertAlmostEqual(stats.best_score, 0.9)
        # The Jan 1 result sits exactly on the 30-day boundary and is excluded
        self.assertEqual(stats.current_difficulty, "advanced")
        self.assertAlmostEqual(stats.total_time_spent, 140)
        self.assertAlmostEqual(stats.average_time_per_question, 140 / 30)
        self.assertEqual(stats.streak_history, [3])
        self.assertAlmostEqual(stats.improvement_rate, (0.9 - 0.65) / 0.65 * 100)
        self.assertAlmostEqual(stats.consistency_score, 98)
        self.assertEqual(stats.last_quiz_date, "2025-01-05")
        self.assertEqual(stats.learning_path[0], "Practice intermediate concepts")
        self.assertEqual(stats.weak_areas, [])
        self.assertEqual(stats.strong_areas, ["Consistent performance"])


class TestDerivedAdvice(unittest.TestCase):
    def test_weak_areas(self):
        results = [result(3, time_spent=200), result(4, time_spent=150)]
        self.assertEqual(
            weak_areas(results),
            ["Basic concepts", "Fundamental syntax", "Problem-solving skills", "Speed and efficiency"],
        )

    def test_strong_areas(self):
        results = [result(9, time_spent=30, streak_count=4), result(10, time_spent=20)]
        self.assertEqual(
            strong_areas(results),
            ["Conceptual understanding", "Problem-solving", "Consistent performance", "Quick thinking"],
        )

    def test_learning_path_levels_and_quiz_type_followup(self):
        self.assertEqual(learning_path([result(2)])[0], "Review fundamental concepts")
        self.assertEqual(learning_path([result(10)])[0], "Advanced topics exploration")
        mc = learning_path([result(10, quiz_type="multiple-choice")])
        self.assertEqual(mc[-1], "Try code completion questions")
        cc = learning_path([result(10, quiz_type="code-completion")])
        self.assertEqual(cc[-1], "Practice scenario-based questions")
        self.assertEqual(len(learning_path([result(10, quiz_type="matching")])), 3)

    def test_learning_path_uses_last_five(self):
        history = [result(0, days_ago=10 - i) for i in range(5)] + [result(10, days_ago=i) for i in range(5, 0, -1)]
        self.assertEqual(learning_path(history)[0], "Advanced topics exploration")

    def test_consistency(self):
        self.assertEqual(consistency_score([result(5)]), 0)
        self.assertEqual(consistency_score([result(5, days_ago=200), result(5)]), 0)
        self.assertEqual(consistency_score([result(5, days_ago=1), result(5)]), 99)


class TestGlobalStats(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(QuizTracker().global_stats("ada").total_quizzes, 0)

    def test_favorites_and_totals(self):
        tracker = QuizTracker(clock=lambda: NOW)
        tracker.save_result("ada", result(5, topic="SQL", language="SQL", time_spent=30))
        tracker.save_result("ada", result(7, topic="Python", language="Python", streak_count=5))
        tracker.save_result("ada", result(9, topic="Python", language="Python", streak_count=2))
        stats = tracker.global_stats("ada")
        self.assertEqual(stats.total_quizzes, 3)
        self.assertEqual(stats.total_questions, 30)
        self.assertAlmostEqual(stats.average_score, 21 / 30)
        self.assertEqual(stats.total_time_spent, 30)
        self.assertEqual(stats.favorite_language, "Python")
        self.assertEqual(stats.favorite_topic, "Python")
        self.assertEqual(stats.total_streak, 5)


if __name__ == "__main__":
    unittest.main()
