"""
Service layer for student records.

This module provides the CRUD operations on a ``StudentStore``.
Every operation validates its input and checks the store invariants
(unique case‑insensitive names, existing ids) before touching the
store, so a rejected call leaves the collection unchanged.  Failures
are raised as ``StudentError`` subclasses carrying the French
messages shown to users.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from student_records_api.app.core.errors import (
    DuplicateName,
    InvalidId,
    NotFound,
    ValidationFailure,
)
from student_records_api.app.core.store import StudentRecord, StudentStore
from student_records_api.app.schemas.student import (
    StudentCreate,
    StudentListItem,
    StudentRead,
    StudentUpdate,
)
from student_records_api.app.utils.dates import (
    calculate_age,
    format_date_to_french,
    get_current_iso_date,
    is_valid_birth_date,
)
from student_records_api.app.utils.validators import (
    generate_student_id,
    has_forbidden_chars,
    is_valid_name,
    is_valid_student_id,
    sanitize_name,
)

logger = logging.getLogger(__name__)

MSG_NAME_REQUIRED = "Le nom est requis"
MSG_NAME_FORBIDDEN_CHARS = "Le nom contient des caractères non autorisés"
MSG_NAME_LENGTH = "Le nom doit contenir entre 2 et 50 caractères"
MSG_BIRTH_REQUIRED = "La date de naissance est requise"
MSG_BIRTH_INVALID = "Veuillez entrer une date de naissance valide"
MSG_DUPLICATE_NAME = "Un étudiant avec ce nom existe déjà."
MSG_DUPLICATE_OTHER_NAME = "Un autre étudiant avec ce nom existe déjà."
MSG_INVALID_ID = "ID d'étudiant invalide."
MSG_NOT_FOUND = "Étudiant non trouvé."


def validate_student_data(name: Optional[str], birth: Optional[str]) -> Tuple[str, str]:
    """Validate a name/birth pair and return the cleaned values.

    All problems are collected before raising, so the caller gets one
    message per faulty field.  The returned name is sanitized.
    """
    errors: List[str] = []

    if not isinstance(name, str) or not name.strip():
        errors.append(MSG_NAME_REQUIRED)
    elif not is_valid_name(name):
        if has_forbidden_chars(name):
            errors.append(MSG_NAME_FORBIDDEN_CHARS)
        else:
            errors.append(MSG_NAME_LENGTH)

    if not birth:
        errors.append(MSG_BIRTH_REQUIRED)
    elif not is_valid_birth_date(birth):
        errors.append(MSG_BIRTH_INVALID)

    if errors:
        raise ValidationFailure(errors)
    return sanitize_name(name), birth


class StudentService:
    """Service class for managing student records."""

    @classmethod
    def list_students(cls, store: StudentStore) -> List[StudentListItem]:
        """Return every student in insertion order with display fields."""
        return [
            StudentListItem(
                **cls._record_to_read(record).model_dump(),
                formatted_birth=format_date_to_french(record.birth),
                age=calculate_age(record.birth),
            )
            for record in store.all()
        ]

    @classmethod
    def create_student(cls, store: StudentStore, data: StudentCreate) -> StudentRead:
        """Validate and append a new student.

        Raises ``ValidationFailure`` for bad input and ``DuplicateName``
        when the (sanitized) name is already taken, ignoring case.
        """
        name, birth = validate_student_data(data.name, data.birth)
        if store.find_by_name(name) is not None:
            raise DuplicateName([MSG_DUPLICATE_NAME])

        record = StudentRecord(
            id=generate_student_id(),
            name=name,
            birth=birth,
            created_at=get_current_iso_date(),
        )
        store.append(record)
        logger.info("Student added: %s (%s) id=%s", name, birth, record.id)
        return cls._record_to_read(record)

    @classmethod
    def get_student(cls, store: StudentStore, student_id: str) -> StudentRead:
        """Return a single student by id."""
        if not is_valid_student_id(student_id):
            raise InvalidId([MSG_INVALID_ID])
        record = store.find_by_id(student_id)
        if record is None:
            raise NotFound([MSG_NOT_FOUND])
        return cls._record_to_read(record)

    @classmethod
    def update_student(cls, store: StudentStore, student_id: str, data: StudentUpdate) -> StudentRead:
        """Replace the name and birth date of an existing student.

        The id and creation timestamp are kept; ``updated_at`` is
        refreshed.  Input is validated before the id is looked up.
        """
        name, birth = validate_student_data(data.name, data.birth)
        if not is_valid_student_id(student_id):
            raise InvalidId([MSG_INVALID_ID])
        index = store.index_of(student_id)
        if index < 0:
            raise NotFound([MSG_NOT_FOUND])
        if store.find_by_name(name, exclude_id=student_id) is not None:
            raise DuplicateName([MSG_DUPLICATE_OTHER_NAME])

        current = store.find_by_id(student_id)
        updated = replace(current, name=name, birth=birth, updated_at=get_current_iso_date())
        store.replace(index, updated)
        logger.info("Student updated: %s -> %s (%s) id=%s", current.name, name, birth, student_id)
        return cls._record_to_read(updated)

    @classmethod
    def delete_student(cls, store: StudentStore, student_id: str) -> StudentRead:
        """Remove a student and return the removed record."""
        if not is_valid_student_id(student_id):
            raise InvalidId([MSG_INVALID_ID])
        index = store.index_of(student_id)
        if index < 0:
            raise NotFound([MSG_NOT_FOUND])
        removed = store.remove(index)
        logger.info("Student deleted: %s id=%s", removed.name, student_id)
        return cls._record_to_read(removed)

    @staticmethod
    def _record_to_read(record: StudentRecord) -> StudentRead:
        """Convert a stored record to a ``StudentRead`` schema instance."""
        return StudentRead.model_validate(record)
