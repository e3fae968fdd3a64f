"""Tests for utils.corpus_adapters: raw rows to CorpusDocument."""

import logging

from content_guard.schemas.similarity_schemas import DocumentKind
from content_guard.utils.corpus_adapters import (
    article_to_document,
    submission_to_document,
    build_corpus,
)


class TestArticleToDocument:
    def test_prefers_content(self):
        doc = article_to_document({"id": 42, "title": "T", "content": "body", "description": "summary"})
        assert doc.id == "42"
        assert doc.kind == DocumentKind.ARTICLE
        assert doc.title == "T"
        assert doc.text == "body"

    def test_falls_back_to_description(self):
        doc = article_to_document({"id": "a1", "title": "T", "content": "", "description": "summary"})
        assert doc.text == "summary"

    def test_missing_fields_become_empty(self):
        doc = article_to_document({"id": "a2", "title": None})
        assert doc.title == ""
        assert doc.text == ""


class TestSubmissionToDocument:
    def test_uses_description(self):
        doc = submission_to_document({"id": 7, "title": "Tip", "description": "Something happened"})
        assert doc.id == "7"
        assert doc.kind == DocumentKind.SUBMISSION
        assert doc.text == "Something happened"


class TestBuildCorpus:
    ARTICLES = [
        {"id": 1, "title": "A1", "content": "first"},
        {"id": 2, "title": "A2", "content": "second"},
    ]
    SUBMISSIONS = [
        {"id": "s1", "title": "S1", "description": "pending one", "status": "pending"},
        {"id": "s2", "title": "S2", "description": "rejected one", "status": "rejected"},
        {"id": "s3", "title": "S3", "description": "approved one", "status": "Approved"},
        {"id": "s4", "title": "S4", "description": "no status"},
    ]

    def test_articles_then_comparable_submissions(self):
        corpus = build_corpus(self.ARTICLES, self.SUBMISSIONS)
        assert [d.id for d in corpus] == ["1", "2", "s1", "s3", "s4"]
        assert [d.kind for d in corpus[:2]] == [DocumentKind.ARTICLE] * 2

    def test_exclude_ids(self):
        corpus = build_corpus(self.ARTICLES, self.SUBMISSIONS, exclude_ids=[2, "s1"])
        assert [d.id for d in corpus] == ["1", "s3", "s4"]

    def test_limit_keeps_newest(self):
        corpus = build_corpus(self.ARTICLES, self.SUBMISSIONS, limit=1)
        assert [d.id for d in corpus] == ["1", "s1"]

    def test_truncation_is_logged(self, caplog):
        caplog.set_level(logging.WARNING)
        build_corpus(self.ARTICLES, self.SUBMISSIONS, limit=1)
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings == [
            "Corpus: keeping newest 1 of 2 articles",
            "Corpus: keeping newest 1 of 3 submissions",
        ]

    def test_no_warning_under_limit(self, caplog):
        caplog.set_level(logging.WARNING)
        build_corpus(self.ARTICLES, self.SUBMISSIONS)
        assert not [r for r in caplog.records if r.levelno == logging.WARNING]

    def test_no_limit(self):
        articles = [{"id": i, "title": str(i)} for i in range(5)]
        assert len(build_corpus(articles, [], limit=None)) == 5

    def test_empty(self):
        assert build_corpus([], []) == []
