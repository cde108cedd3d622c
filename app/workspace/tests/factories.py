"""
Factory Boy factories for workspace models.

Usage:
    from workspace.tests.factories import RepositoryFactory, MemberFactory

    repo = RepositoryFactory(privacy=Privacy.PRIVATE)
    member = MemberFactory(subject=repo, user=user)
    comment = CommentFactory(commentable=DocFactory(repository=repo))
"""

import factory
from django.contrib.contenttypes.models import ContentType

from authentication.tests.factories import UserFactory
from workspace.models import IssueStatus, MemberRole, Privacy


class GroupFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = "workspace.Group"

    slug = factory.Sequence(lambda n: f"group{n}")
    name = factory.Sequence(lambda n: f"Group {n}")


class RepositoryFactory(factory.django.DjangoModelFactory):
    """Public repository by default."""

    class Meta:
        model = "workspace.Repository"

    group = factory.SubFactory(GroupFactory)
    slug = factory.Sequence(lambda n: f"repo{n}")
    name = factory.Sequence(lambda n: f"Repo {n}")
    privacy = Privacy.PUBLIC


class MemberFactory(factory.django.DjangoModelFactory):
    """Membership on a repository unless ``subject`` is given."""

    class Meta:
        model = "workspace.Member"
        exclude = ["subject"]

    subject = factory.SubFactory(RepositoryFactory)
    subject_content_type = factory.LazyAttribute(
        lambda o: ContentType.objects.get_for_model(o.subject)
    )
    subject_id = factory.SelfAttribute("subject.pk")
    user = factory.SubFactory(UserFactory)
    role = MemberRole.READER


class DocFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = "workspace.Doc"

    repository = factory.SubFactory(RepositoryFactory)
    slug = factory.Sequence(lambda n: f"doc{n}")
    title = factory.Sequence(lambda n: f"Doc {n}")
    body = "Hello world"
    body_html = "<p>Hello world</p>"


class IssueFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = "workspace.Issue"

    repository = factory.SubFactory(RepositoryFactory)
    iid = factory.Sequence(lambda n: n + 1)
    title = factory.Sequence(lambda n: f"Issue {n}")
    body = "Something is broken"
    body_html = "<p>Something is broken</p>"
    status = IssueStatus.OPEN
    user = factory.SubFactory(UserFactory)


class CommentFactory(factory.django.DjangoModelFactory):
    """Comment on a doc unless ``commentable`` is given."""

    class Meta:
        model = "workspace.Comment"
        exclude = ["commentable"]

    commentable = factory.SubFactory(DocFactory)
    commentable_content_type = factory.LazyAttribute(
        lambda o: ContentType.objects.get_for_model(o.commentable)
    )
    commentable_id = factory.SelfAttribute("commentable.pk")
    user = factory.SubFactory(UserFactory)
    body = "Looks good"
    body_html = "<p>Looks good</p>"
