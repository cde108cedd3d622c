"""
Tests for target resolution and mention excerpts.
"""

import pytest

from authentication.tests.factories import UserFactory
from notifications.exceptions import TargetResolutionError
from notifications.models import NotifyType, TargetKind
from notifications.resolvers import (
    doc_mention_excerpt,
    model_for_kind,
    resolve_target,
    target_kind,
)
from workspace.models import Doc, Repository
from workspace.tests.factories import (
    CommentFactory,
    DocFactory,
    GroupFactory,
    IssueFactory,
    MemberFactory,
    RepositoryFactory,
)

HOST = "https://docs.example.com"


class TestTargetKind:

    @pytest.mark.parametrize(
        "factory,kind",
        [
            (MemberFactory, TargetKind.MEMBER),
            (RepositoryFactory, TargetKind.REPOSITORY),
            (CommentFactory, TargetKind.COMMENT),
            (IssueFactory, TargetKind.ISSUE),
            (DocFactory, TargetKind.DOC),
            (GroupFactory, TargetKind.GROUP),
        ],
    )
    def test_registered_models_resolve(self, db, config, factory, kind):
        assert target_kind(factory(), config) == kind

    def test_none_target_raises(self, config):
        with pytest.raises(TargetResolutionError):
            target_kind(None, config)

    def test_unsaved_target_raises(self, config):
        with pytest.raises(TargetResolutionError) as exc_info:
            target_kind(Repository(name="draft"), config)

        assert exc_info.value.error_code == "TARGET_UNRESOLVABLE"

    def test_unregistered_model_raises(self, db, config):
        with pytest.raises(TargetResolutionError) as exc_info:
            target_kind(UserFactory(), config)

        assert exc_info.value.details == {"model": "authentication.User"}

    def test_plain_object_raises(self, config):
        with pytest.raises(TargetResolutionError):
            target_kind(object(), config)


class TestModelForKind:

    def test_accepts_kind_and_string(self, config):
        assert model_for_kind(TargetKind.DOC, config) is Doc
        assert model_for_kind("Doc", config) is Doc

    def test_unknown_kind_raises(self, config):
        with pytest.raises(TargetResolutionError):
            model_for_kind("Wiki", config)


class TestDocMentionExcerpt:

    def test_joins_matching_lines_with_line_breaks(self):
        body = "Hello @jason\n\n@jason hello"

        assert doc_mention_excerpt(body, "jason") == "Hello @jason<br /><br />@jason hello"

    def test_keeps_source_order_and_skips_other_lines(self):
        body = "first @jason\nnothing here\n  second @jason, thanks  "

        assert doc_mention_excerpt(body, "jason") == "first @jason<br /><br />second @jason, thanks"

    def test_ignores_longer_slugs(self):
        assert doc_mention_excerpt("ping @jasonlee", "jason") == ""
        assert doc_mention_excerpt("ping @jason-lee", "jason") == ""

    def test_empty_when_recipient_not_mentioned(self):
        assert doc_mention_excerpt("Hello @alice", "jason") == ""

    def test_empty_without_slug_or_body(self):
        assert doc_mention_excerpt("Hello @jason", None) == ""
        assert doc_mention_excerpt("", "jason") == ""

    def test_escapes_html(self):
        assert doc_mention_excerpt("<b>@jason</b>", "jason") == "&lt;b&gt;@jason&lt;/b&gt;"


class TestResolveTarget:

    def test_member_of_group(self, db, config):
        group = GroupFactory(slug="acme", name="Acme")
        member = MemberFactory(subject=group)

        info = resolve_target(member, NotifyType.ADD_MEMBER, config=config)

        assert info.kind == TargetKind.MEMBER
        assert info.url == f"{HOST}/acme"
        assert info.title == "Acme"
        assert info.parent_kind == TargetKind.GROUP
        assert info.parent_id == group.pk
        assert info.mention_excerpt == ""

    def test_repository_title_is_owner_slash_name(self, db, config):
        repo = RepositoryFactory(group=GroupFactory(name="Acme"), name="Handbook")

        info = resolve_target(repo, NotifyType.REPO_IMPORT, config=config)

        assert info.title == "Acme / Handbook"
        assert info.url == f"{HOST}{repo.get_absolute_url()}"

    @pytest.mark.parametrize("notify_type", [NotifyType.COMMENT, NotifyType.MENTION])
    def test_comment_excerpt_is_rendered_body(self, db, config, notify_type):
        comment = CommentFactory(body_html="<p>Nice @jason</p>")

        info = resolve_target(comment, notify_type, config=config)

        assert info.mention_excerpt == "<p>Nice @jason</p>"
        assert info.body_html == "<p>Nice @jason</p>"
        assert info.parent_kind == TargetKind.DOC
        assert info.parent_title == comment.commentable.title

    def test_doc_mention_excerpt_is_for_recipient(self, db, config):
        doc = DocFactory(body="Hi @jason\nHi @alice")
        jason = UserFactory(slug="jason")

        info = resolve_target(doc, NotifyType.MENTION, recipient=jason, config=config)

        assert info.mention_excerpt == "Hi @jason"

    def test_no_excerpt_for_other_types(self, db, config):
        issue = IssueFactory(body="@jason please look")

        info = resolve_target(issue, NotifyType.ISSUE_ASSIGN, config=config)

        assert info.mention_excerpt == ""
