"""Markdown resume rendering from profile fields."""

from job_board.profile.models import ProfileData
from job_board.profile.records import ProfileRecord
from job_board.utils.text_processing import format_date_range, join_present


def build_markdown(record: ProfileRecord) -> str:
    """Render a record's profile fields as a Markdown resume.

    Returns '' when every contributing field is empty.
    """
    return render_profile(ProfileData.from_record(record))


def render_profile(profile: ProfileData) -> str:
    lines: list[str] = []

    if profile.full_name:
        lines.append(f"# {profile.full_name}")
    if profile.headline:
        lines.append(f"**{profile.headline}**")
    meta = join_present([profile.country, profile.level], " · ")
    if meta:
        lines.append(meta)
    links = join_present([profile.linkedin, profile.portfolio], " | ")
    if links:
        lines.append(links)
    if lines:
        lines.append("")

    if profile.bio:
        lines += ["## Summary", profile.bio, ""]

    if profile.skills:
        lines.append("## Skills")
        lines += [f"- {skill}" for skill in profile.skills]
        lines.append("")

    if profile.languages:
        lines.append("## Languages")
        lines += [f"- {language}" for language in profile.languages]
        lines.append("")

    if profile.work_experience:
        lines.append("## Work Experience")
        for job in profile.work_experience:
            header = join_present([job.role, job.company], " — ")
            if header:
                lines.append(f"**{header}**")
            date_range = format_date_range(job.start_date, job.end_date, job.is_current)
            if date_range:
                lines.append(date_range)
            if job.description:
                lines.append(job.description)
            lines.append("")

    if profile.education:
        lines.append("## Education")
        for item in profile.education:
            if item.school:
                lines.append(f"**{item.school}**")
            header = join_present([item.degree, item.field_of_study], " — ")
            if header:
                lines.append(header)
            date_range = format_date_range(item.start_date, item.end_date, item.is_current)
            if date_range:
                lines.append(date_range)
            if item.description:
                lines.append(item.description)
            lines.append("")

    if profile.certifications:
        lines.append("## Certifications")
        for cert in profile.certifications:
            header = join_present([cert.name, cert.issuer], " — ")
            if header:
                issued = f" ({cert.issued_date})" if cert.issued_date else ""
                lines.append(f"- {header}{issued}")
            if cert.credential_url:
                lines.append(f"  {cert.credential_url}")
        lines.append("")

    return "\n".join(lines).strip()
