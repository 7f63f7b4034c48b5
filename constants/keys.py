"""Session-state keys and canonical field paths for the onboarding record."""


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    RECORD = "onboarding_record"
    STEP = "current_step"
    COMPLETED_STEPS = "completed_steps"
    PENDING_ERRORS = "pending_validation_errors"
    RECORD_DIRTY = "record_dirty"
    IS_SUBMITTING = "is_submitting"
    LAST_SUBMISSION = "last_submission"
    SESSION_ID = "session_id"
    LANG = "lang"


class Sections:
    """Top-level section names of the onboarding record."""

    PERSONAL_INFO = "personal_info"
    JOB_DETAILS = "job_details"
    SKILLS = "skills"
    EMERGENCY_CONTACT = "emergency_contact"
    REVIEW = "review"

    ORDER = (PERSONAL_INFO, JOB_DETAILS, SKILLS, EMERGENCY_CONTACT, REVIEW)


class FieldPaths:
    """Dotted paths for every editable field of the onboarding record."""

    FULL_NAME = "personal_info.full_name"
    EMAIL = "personal_info.email"
    PHONE_NUMBER = "personal_info.phone_number"
    DATE_OF_BIRTH = "personal_info.date_of_birth"
    PROFILE_PICTURE = "personal_info.profile_picture"

    DEPARTMENT = "job_details.department"
    POSITION_TITLE = "job_details.position_title"
    START_DATE = "job_details.start_date"
    JOB_TYPE = "job_details.job_type"
    SALARY = "job_details.salary"
    MANAGER = "job_details.manager"

    PRIMARY_SKILLS = "skills.primary_skills"
    EXPERIENCE = "skills.experience"
    PREFERRED_HOURS = "skills.preferred_hours"
    PREFERRED_HOURS_START = "skills.preferred_hours.start"
    PREFERRED_HOURS_END = "skills.preferred_hours.end"
    REMOTE_WORK_PREFERENCE = "skills.remote_work_preference"
    MANAGER_APPROVAL = "skills.manager_approval"
    EXTRA_NOTES = "skills.extra_notes"

    CONTACT_NAME = "emergency_contact.contact_name"
    RELATIONSHIP = "emergency_contact.relationship"
    CONTACT_PHONE = "emergency_contact.phone_number"
    GUARDIAN_NAME = "emergency_contact.guardian_name"
    GUARDIAN_PHONE = "emergency_contact.guardian_phone"

    CONFIRMATION = "review.confirmation"


def experience_path(skill: str) -> str:
    """Return the field path for the experience entry of ``skill``."""

    return f"{FieldPaths.EXPERIENCE}.{skill}"


def split_field_path(path: str) -> list[str]:
    """Split ``path`` into record keys.

    Experience entries are keyed by skill name, which may itself contain dots
    (``Node.js``), so everything after ``skills.experience.`` is one key.
    """

    prefix = f"{FieldPaths.EXPERIENCE}."
    if path.startswith(prefix) and len(path) > len(prefix):
        return [*FieldPaths.EXPERIENCE.split("."), path[len(prefix):]]
    return path.split(".")
