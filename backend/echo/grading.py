"""Section graders for contest submissions.

All three graders are pure: they take the contest content and the user's
answers and return a bounded score with feedback. Missing or partial
answers score zero rather than raising, since leaving a section unfinished
is a normal outcome.
"""

from __future__ import annotations
import math
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel


GRAMMAR_POINTS = 10
MAX_SECTION_SCORE = 100
MAX_TOTAL_SCORE = 300


class GradedAnswer(BaseModel):
	questionIndex: int
	selectedAnswer: str
	isCorrect: bool


class GrammarResult(BaseModel):
	score: int
	answers: List[GradedAnswer]


class SectionResult(BaseModel):
	score: int
	feedback: str = ""


def _normalize(value: Any) -> str:
	if value is None:
		return ""
	return str(value).strip().lower()


def _answers_by_index(answers: Optional[Sequence[Any]], question_count: int) -> Dict[int, str]:
	"""Map question index -> selected answer.

	An explicit ``questionIndex`` wins; otherwise the answer's position in the
	list is used. Indexes outside the question list are dropped.
	"""
	selected: Dict[int, str] = {}
	for position, item in enumerate(answers or []):
		if isinstance(item, dict):
			index = item.get("questionIndex")
			answer = item.get("selectedAnswer")
		else:
			index = getattr(item, "questionIndex", None)
			answer = getattr(item, "selectedAnswer", None)
		if not isinstance(index, int) or isinstance(index, bool):
			index = position
		if 0 <= index < question_count and index not in selected:
			selected[index] = "" if answer is None else str(answer)
	return selected


def grade_grammar(questions: Sequence[Dict[str, Any]], answers: Optional[Sequence[Any]]) -> GrammarResult:
	questions = list(questions or [])
	selected = _answers_by_index(answers, len(questions))
	graded: List[GradedAnswer] = []
	score = 0
	for index, question in enumerate(questions):
		answer = selected.get(index, "")
		expected = _normalize(question.get("answer"))
		is_correct = bool(expected) and _normalize(answer) == expected
		if is_correct:
			score += 1
		graded.append(GradedAnswer(questionIndex=index, selectedAnswer=answer, isCorrect=is_correct))
	return GrammarResult(score=score, answers=graded)


def speaking_score_for(word_count: int) -> int:
	if word_count <= 0:
		return 0
	if word_count < 10:
		score = word_count * 4
	elif word_count < 30:
		score = 40 + word_count
	elif word_count < 50:
		# never below the 29-word score of the previous band
		score = max(65 + (word_count - 30) // 2, 40 + 29)
	else:
		score = 85 + min(15, (word_count - 50) // 5)
	return max(0, min(MAX_SECTION_SCORE, score))


def grade_speaking(transcript: Optional[str]) -> SectionResult:
	text = (transcript or "").strip()
	if not text:
		return SectionResult(score=0, feedback="")
	word_count = len(text.split())
	if word_count >= 50:
		feedback = "Excellent speech! Good length and detail."
	elif word_count >= 30:
		feedback = "Good effort! Try to elaborate more for a higher score."
	else:
		feedback = "Try to speak more. Aim for at least 30 seconds of speaking."
	return SectionResult(score=speaking_score_for(word_count), feedback=feedback)


def grade_reading(transcript: Optional[str], reference: Optional[str]) -> SectionResult:
	text = (transcript or "").strip()
	if not text:
		return SectionResult(score=0, feedback="")
	reference_words = (reference or "").lower().split()
	spoken_words = text.lower().split()
	if reference_words:
		reference_set = set(reference_words)
		# repeated spoken words each count; this is overlap, not alignment
		matches = sum(1 for word in spoken_words if word in reference_set)
		accuracy = matches / len(reference_words) * 100
	else:
		accuracy = 0.0
	score = max(0, min(MAX_SECTION_SCORE, math.floor(accuracy + 0.5)))
	if score >= 80:
		feedback = "Great reading! Clear and accurate pronunciation."
	elif score >= 50:
		feedback = "Good attempt! Practice reading aloud to improve accuracy."
	else:
		feedback = "Keep practicing! Try to read the paragraph more carefully."
	return SectionResult(score=score, feedback=feedback)


def composite_score(grammar_score: int, speaking_score: int, reading_score: int) -> int:
	return grammar_score * GRAMMAR_POINTS + speaking_score + reading_score
