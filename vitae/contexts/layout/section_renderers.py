"""
Section renderers.

One renderer per résumé section. Each turns its slice of the ResumeDocument into
DrawOps on the pager. A renderer whose collection is empty (or holds only blank
entries) emits nothing and consumes no vertical space.

Pagination rules applied here:
- A section title is kept on the same page as its first entry.
- An entry's fixed header lines are reserved together with the entry's estimated
  full height, so a company line never ends up on a different page from its
  position line.
- Once an entry's header is committed, its bullet and description lines reserve one
  line at a time and may continue on the next page.
"""

from typing import List, Optional, Sequence, Tuple

from vitae.contexts.content.dates import format_date, format_date_range, format_location
from vitae.contexts.content.resume_document import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
    SkillGroup,
)
from vitae.contexts.layout.pager import Pager
from vitae.contexts.layout.text_measurer import FontStyle
from vitae.contexts.layout.typesetter import Typesetter

CONTACT_SEPARATOR = " | "
GPA_SEPARATOR = " | "


class SectionRenderer:
    """
    Base class for section renderers.

    Subclasses set name and title and implement entries(), entry_height() and
    render_entry(). Renderers with a different shape (header, summary, skills)
    override render() directly.
    """

    name = ""
    title = ""

    def entries(self, resume: ResumeDocument) -> Sequence:
        """Entries of this section that survive trimming."""
        raise NotImplementedError

    def has_content(self, resume: ResumeDocument) -> bool:
        return len(self.entries(resume)) > 0

    def entry_height(self, entry, ts: Typesetter) -> float:
        """Estimated height of one entry, excluding the gap after it."""
        raise NotImplementedError

    def render_entry(self, entry, pager: Pager, ts: Typesetter) -> None:
        raise NotImplementedError

    def render(self, resume: ResumeDocument, pager: Pager, ts: Typesetter) -> None:
        entries = self.entries(resume)
        if not entries:
            return

        ts.section_header(pager, self.title, keep_with=self.entry_height(entries[0], ts))
        for index, entry in enumerate(entries):
            # The header already reserved room for the first entry
            if index > 0:
                pager.reserve(self.entry_height(entry, ts))
            self.render_entry(entry, pager, ts)
            pager.advance(ts.config.spacing.entry_gap)
        pager.advance(ts.config.spacing.section_end_gap)


class HeaderRenderer(SectionRenderer):
    """Centered name, centered contact line with links, and a full-width rule."""

    name = "header"

    def entries(self, resume: ResumeDocument) -> Sequence:
        return [resume]

    @staticmethod
    def contacts(resume: ResumeDocument) -> List[Tuple[str, Optional[str]]]:
        """(text, link) pairs: phone is plain, email and LinkedIn are links."""
        items = []
        if resume.phone:
            items.append((resume.phone, None))
        if resume.email:
            items.append((resume.email, f"mailto:{resume.email}"))
        if resume.linkedin:
            items.append(("LinkedIn", resume.linkedin))
        return items

    def render(self, resume: ResumeDocument, pager: Pager, ts: Typesetter) -> None:
        config = ts.config
        name_size = config.sizes.name
        name_height = ts.line_height(name_size)

        if resume.full_name:
            lines = ts.wrap(resume.full_name, config.content_width, FontStyle.BOLD, name_size)
            longest = max(ts.width(line, FontStyle.BOLD, name_size) for line in lines)
            x = ts.left_edge + (config.content_width - longest) / 2
            for line in lines:
                pager.reserve(name_height)
                ts.text(pager, line, x, FontStyle.BOLD, name_size)
                pager.advance(name_height)

        contact_size = config.sizes.contact
        pager.advance(config.spacing.name_gap)
        contacts = self.contacts(resume)
        if contacts:
            pager.reserve(ts.line_height(contact_size))
            ts.centered_group(pager, contacts, CONTACT_SEPARATOR, FontStyle.NORMAL, contact_size)
        pager.advance(ts.line_height(contact_size) + config.spacing.contact_gap)

        ts.rule(pager, config.header_rule_width)
        pager.advance(config.spacing.section_gap)


class SummaryRenderer(SectionRenderer):
    """Wrapped summary paragraph at body size."""

    name = "summary"
    title = "Professional Summary"

    def entries(self, resume: ResumeDocument) -> Sequence:
        return [resume.summary] if resume.summary.strip() else []

    def render(self, resume: ResumeDocument, pager: Pager, ts: Typesetter) -> None:
        if not self.has_content(resume):
            return

        size = ts.config.sizes.body
        ts.section_header(pager, self.title, keep_with=ts.line_height(size))
        lines = ts.wrap(resume.summary, ts.config.content_width, FontStyle.NORMAL, size)
        ts.flow_lines(pager, lines, ts.left_edge, FontStyle.NORMAL, size)
        pager.advance(ts.config.spacing.section_end_gap)


class ExperienceRenderer(SectionRenderer):
    """
    Company and date range, position and location, then one bullet per description.

    The date range ends with "Present" whenever the entry is current.
    """

    name = "experience"
    title = "Professional Experience"

    def entries(self, resume: ResumeDocument) -> Sequence[ExperienceEntry]:
        return [entry for entry in resume.experience if not entry.is_blank()]

    def entry_height(self, entry: ExperienceEntry, ts: Typesetter) -> float:
        sizes = ts.config.sizes
        height = 2 * ts.line_height(sizes.entry) + ts.config.spacing.header_line_gap
        for bullet in entry.bullets:
            height += ts.bullet_height(bullet, sizes.body)
        return height

    def render_entry(self, entry: ExperienceEntry, pager: Pager, ts: Typesetter) -> None:
        sizes = ts.config.sizes
        entry_height = ts.line_height(sizes.entry)

        ts.text(pager, entry.company, ts.left_edge, FontStyle.BOLD, sizes.entry)
        dates = format_date_range(entry.start_date, entry.end_date, current=entry.current)
        ts.right_aligned(pager, dates, FontStyle.BOLD, sizes.entry)
        pager.advance(entry_height + ts.config.spacing.header_line_gap)

        ts.text(pager, entry.position, ts.left_edge, FontStyle.ITALIC, sizes.entry)
        location = format_location(entry.city, entry.state)
        ts.right_aligned(pager, location, FontStyle.ITALIC, sizes.entry)
        pager.advance(entry_height)

        for bullet in entry.bullets:
            lines = ts.bullet_lines(bullet, sizes.body)
            ts.flow_lines(pager, lines, ts.bullet_x, FontStyle.NORMAL, sizes.body)


class EducationRenderer(SectionRenderer):
    """
    Degree and location, institution and date range, optional field line.

    An optional GPA sits on the institution line's baseline, right-aligned just
    left of the date range.
    """

    name = "education"
    title = "Education"

    def entries(self, resume: ResumeDocument) -> Sequence[EducationEntry]:
        return [entry for entry in resume.education if not entry.is_blank()]

    def entry_height(self, entry: EducationEntry, ts: Typesetter) -> float:
        lines = 3 if entry.field else 2
        return lines * ts.line_height(ts.config.sizes.entry)

    def render_entry(self, entry: EducationEntry, pager: Pager, ts: Typesetter) -> None:
        size = ts.config.sizes.entry
        line_height = ts.line_height(size)

        ts.text(pager, entry.degree, ts.left_edge, FontStyle.BOLD_ITALIC, size)
        location = format_location(entry.city, entry.state)
        ts.right_aligned(pager, location, FontStyle.BOLD_ITALIC, size)
        pager.advance(line_height)

        ts.text(pager, entry.institution, ts.left_edge, FontStyle.NORMAL, size)
        dates = format_date_range(entry.start_date, entry.end_date)
        date_run = ts.right_aligned(pager, dates, FontStyle.NORMAL, size)
        if entry.gpa:
            right = ts.right_edge
            if date_run is not None:
                right = date_run.x - ts.width(GPA_SEPARATOR, FontStyle.NORMAL, size)
            ts.right_aligned(pager, f"GPA: {entry.gpa}", FontStyle.BOLD_ITALIC, size, right=right)
        pager.advance(line_height)

        if entry.field:
            ts.text(pager, entry.field, ts.left_edge, FontStyle.NORMAL, size)
            pager.advance(line_height)


class SkillsRenderer(SectionRenderer):
    """
    Per group: bold "• {group}: " prefix, then the comma-joined skills in italic,
    wrapped to the width left after the prefix and indented past it.
    """

    name = "skills"
    title = "Skills"

    # Gap between the bold prefix and the skill list
    PREFIX_GAP = 5

    def entries(self, resume: ResumeDocument) -> Sequence[SkillGroup]:
        return [group for group in resume.skills if not group.is_blank()]

    def _prefix(self, group: SkillGroup, ts: Typesetter) -> str:
        return f"{ts.config.bullet_marker}{group.group_name.strip()}: "

    def _skill_lines(self, group: SkillGroup, ts: Typesetter) -> Tuple[float, List[str]]:
        sizes = ts.config.sizes
        prefix_width = ts.width(self._prefix(group, ts), FontStyle.BOLD, sizes.body)
        max_width = ts.config.content_width - prefix_width - self.PREFIX_GAP
        skills_text = ", ".join(group.visible_skills)
        return prefix_width, ts.wrap(skills_text, max_width, FontStyle.ITALIC, sizes.skills)

    def entry_height(self, group: SkillGroup, ts: Typesetter) -> float:
        _, lines = self._skill_lines(group, ts)
        return len(lines) * ts.line_height(ts.config.sizes.body)

    def render(self, resume: ResumeDocument, pager: Pager, ts: Typesetter) -> None:
        groups = self.entries(resume)
        if not groups:
            return

        sizes = ts.config.sizes
        line_height = ts.line_height(sizes.body)
        ts.section_header(pager, self.title, keep_with=self.entry_height(groups[0], ts))

        for group_index, group in enumerate(groups):
            prefix_width, lines = self._skill_lines(group, ts)
            if group_index > 0:
                pager.reserve(len(lines) * line_height)
            ts.text(pager, self._prefix(group, ts), ts.left_edge, FontStyle.BOLD, sizes.body)
            skills_x = ts.left_edge + prefix_width + self.PREFIX_GAP
            for index, line in enumerate(lines):
                if index > 0:
                    pager.reserve(line_height)
                ts.text(pager, line, skills_x, FontStyle.ITALIC, sizes.skills)
                pager.advance(line_height)
            pager.advance(ts.config.spacing.skill_group_gap)

        pager.advance(ts.config.spacing.section_end_gap)


class ProjectsRenderer(SectionRenderer):
    """Bold name (linked when a link exists), bulleted description, technology line."""

    name = "projects"
    title = "Projects"

    def entries(self, resume: ResumeDocument) -> Sequence[ProjectEntry]:
        return [entry for entry in resume.projects if not entry.is_blank()]

    def _technology_lines(self, entry: ProjectEntry, ts: Typesetter) -> List[str]:
        if not entry.visible_technologies:
            return []
        text = ", ".join(entry.visible_technologies)
        return ts.wrap(text, ts.config.content_width, FontStyle.ITALIC, ts.config.sizes.body)

    def entry_height(self, entry: ProjectEntry, ts: Typesetter) -> float:
        sizes = ts.config.sizes
        height = ts.line_height(sizes.entry) if entry.name else 0
        if entry.description:
            height += ts.bullet_height(entry.description, sizes.body)
        technology_lines = self._technology_lines(entry, ts)
        if technology_lines:
            height += ts.config.spacing.technologies_gap
            height += len(technology_lines) * ts.line_height(sizes.body)
        return height

    def render_entry(self, entry: ProjectEntry, pager: Pager, ts: Typesetter) -> None:
        sizes = ts.config.sizes

        if entry.name:
            ts.text(pager, entry.name, ts.left_edge, FontStyle.BOLD, sizes.entry, link=entry.link)
            pager.advance(ts.line_height(sizes.entry))

        if entry.description:
            lines = ts.bullet_lines(entry.description, sizes.body)
            ts.flow_lines(pager, lines, ts.bullet_x, FontStyle.NORMAL, sizes.body)

        technology_lines = self._technology_lines(entry, ts)
        if technology_lines:
            pager.advance(ts.config.spacing.technologies_gap)
            ts.flow_lines(pager, technology_lines, ts.left_edge, FontStyle.ITALIC, sizes.body)


class CertificationsRenderer(SectionRenderer):
    """Bold name (linked when a link exists), then issuer left and date right."""

    name = "certifications"
    title = "Certifications"

    def entries(self, resume: ResumeDocument) -> Sequence[CertificationEntry]:
        return [entry for entry in resume.certifications if not entry.is_blank()]

    def entry_height(self, entry: CertificationEntry, ts: Typesetter) -> float:
        sizes = ts.config.sizes
        height = ts.line_height(sizes.entry) if entry.name else 0
        if entry.issuer or format_date(entry.date):
            height += ts.line_height(sizes.body)
        return height

    def render_entry(self, entry: CertificationEntry, pager: Pager, ts: Typesetter) -> None:
        sizes = ts.config.sizes

        if entry.name:
            ts.text(pager, entry.name, ts.left_edge, FontStyle.BOLD, sizes.entry, link=entry.link)
            pager.advance(ts.line_height(sizes.entry))

        date = format_date(entry.date)
        if entry.issuer or date:
            ts.text(pager, entry.issuer, ts.left_edge, FontStyle.NORMAL, sizes.body)
            ts.right_aligned(pager, date, FontStyle.NORMAL, sizes.body)
            pager.advance(ts.line_height(sizes.body))


# Fixed emission order
SECTION_RENDERERS: Tuple[SectionRenderer, ...] = (
    HeaderRenderer(),
    SummaryRenderer(),
    ExperienceRenderer(),
    EducationRenderer(),
    SkillsRenderer(),
    ProjectsRenderer(),
    CertificationsRenderer(),
)
