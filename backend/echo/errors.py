from __future__ import annotations


class EchoError(Exception):
	"""Base class for contest domain errors; `status_code` is the HTTP mapping."""

	status_code = 500

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message


class ContestNotFound(EchoError):
	status_code = 404

	def __init__(self, contest_id: int | str) -> None:
		super().__init__("Contest not found")
		self.contest_id = contest_id


class AlreadySubmitted(EchoError):
	status_code = 400

	def __init__(self, username: str, contest_id: int) -> None:
		super().__init__("You have already submitted this contest")
		self.username = username
		self.contest_id = contest_id
