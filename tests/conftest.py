"""Pytest configuration and shared fixtures for wikiglossary tests."""

import copy
from typing import Any

import pytest

COMMIT_SHA = "0123456789abcdef0123456789abcdef01234567"


def _make_reference_draft() -> dict[str, Any]:
    """Six-section delivery draft with repeated bilingual terms."""
    sections = []
    for section_index in range(6):
        subsections = []
        for subsection_index in range(3):
            if section_index == 0 and subsection_index == 0:
                body = (
                    "이 구간은 비동기 큐 (async queue)와 캐시 계층 (cache layer)을 "
                    "함께 사용해 요청 급증 구간에서도 안정적인 처리량을 유지합니다."
                )
            else:
                body = (
                    "이 하위 섹션은 코드 책임 경계와 데이터 흐름을 충분한 길이로 "
                    "설명해 계약 테스트의 최소 길이 요구를 만족합니다."
                )
            subsections.append(
                {
                    "sectionId": f"sec-{section_index + 1}",
                    "subsectionId": f"sub-{section_index + 1}-{subsection_index + 1}",
                    "titleKo": f"하위 섹션 {section_index + 1}-{subsection_index + 1}",
                    "bodyKo": body,
                }
            )
        if section_index == 0:
            summary = (
                "캐시 계층(Cache Layer)은 읽기 부하를 줄이고 데이터 접근 지연을 "
                "완화하는 핵심 경계입니다."
            )
        else:
            summary = f"섹션 {section_index + 1}은 저장소 구조를 설명하는 기본 요약입니다."
        sections.append(
            {
                "sectionId": f"sec-{section_index + 1}",
                "titleKo": f"섹션 {section_index + 1}",
                "summaryKo": summary,
                "subsections": subsections,
            }
        )

    return {
        "artifactType": "wiki-draft",
        "repoFullName": "acme/widget",
        "commitSha": COMMIT_SHA,
        "generatedAt": "2026-02-17T17:00:00.000Z",
        "overviewKo": (
            "비동기 큐(Async Queue)는 작업 순서를 안정적으로 보장하며 재시도 정책과 "
            "함께 파이프라인의 장애 복원력을 높입니다."
        ),
        "sections": sections,
        "claims": [
            {
                "claimId": "claim-1",
                "sectionId": "sec-1",
                "subsectionId": "sub-1-1",
                "statementKo": (
                    "캐시 계층(cache layer)은 읽기 집중 트래픽에서 백엔드 호출량을 "
                    "줄여 지연 시간을 안정적으로 낮춥니다."
                ),
                "citationIds": ["cit-1"],
            }
        ],
        "citations": [
            {
                "citationId": "cit-1",
                "evidenceId": "ev-1",
                "repoPath": "src/runtime/pipeline.ts",
                "lineRange": {"start": 1, "end": 20},
                "commitSha": COMMIT_SHA,
                "rationale": (
                    "작업 실행기(task executor)는 큐 소비 속도를 제어하고 실패 재시도 "
                    "상태를 추적합니다."
                ),
            }
        ],
        "groundingReport": {
            "artifactType": "grounding-report",
            "gateId": "GND-01",
            "checkedAt": "2026-02-17T17:00:10.000Z",
            "passed": True,
            "totalClaims": 1,
            "claimsWithCitations": 1,
            "citationCoverage": 1,
            "issues": [],
        },
    }


_REFERENCE_DRAFT = _make_reference_draft()


@pytest.fixture
def reference_draft() -> dict[str, Any]:
    """Provide a fresh copy of the reference delivery draft.

    Returns:
        Draft mapping in camelCase wire format
    """
    return copy.deepcopy(_REFERENCE_DRAFT)


@pytest.fixture
def empty_draft() -> dict[str, Any]:
    """Draft with text in every field but no bilingual markup."""
    return {
        "overviewKo": "이 저장소는 작업 파이프라인을 설명합니다.",
        "sections": [
            {
                "summaryKo": "섹션 요약입니다.",
                "subsections": [{"bodyKo": "본문에는 괄호 용어가 없습니다."}],
            }
        ],
        "claims": [{"statementKo": "주장 문장입니다."}],
        "citations": [{"rationale": "근거 설명입니다."}],
    }


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
