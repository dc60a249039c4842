from typing import Iterable, Optional


class KeywordMatcher:
    """
    라벨-키워드 매칭 정책

    EXACT:         라벨 == 키워드 (방 종류 티어 점수)
    CONTAINS:      키워드가 라벨에 포함 (우선순위 클래스, 치울 물건 사유)
    BIDIRECTIONAL: 라벨이 키워드를 포함하거나 키워드가 라벨을 포함
                   (고정 가구, 이동식 가구, 치울 물건 목록)

    BIDIRECTIONAL은 "pan"과 "pantry"처럼 의도치 않은 매칭이 생긴다.
    빈 라벨은 어떤 정책에서도 매칭되지 않는다.
    """

    EXACT = "exact"
    CONTAINS = "contains"
    BIDIRECTIONAL = "bidirectional"

    MODES = (EXACT, CONTAINS, BIDIRECTIONAL)

    @staticmethod
    def normalize(label: str) -> str:
        return label.strip().lower()

    @staticmethod
    def match_one(label: str, keyword: str, mode: str) -> bool:
        if mode not in KeywordMatcher.MODES:
            raise ValueError(f"Unknown match mode: {mode}")
        name = KeywordMatcher.normalize(label)
        if not name:
            return False
        if mode == KeywordMatcher.EXACT:
            return name == keyword
        if mode == KeywordMatcher.CONTAINS:
            return keyword in name
        return keyword in name or name in keyword

    @staticmethod
    def first_match(label: str, keywords: Iterable[str], mode: str) -> Optional[str]:
        """
        라벨과 매칭되는 첫 키워드를 반환합니다.

        frozenset은 순서가 없으므로 정렬해서 검사한다 (결과를 결정적으로 유지).

        Args:
            label: 탐지 라벨
            keywords: 키워드 목록
            mode: EXACT | CONTAINS | BIDIRECTIONAL

        Returns:
            매칭된 키워드 또는 None
        """
        if isinstance(keywords, (set, frozenset)):
            if mode == KeywordMatcher.EXACT:
                name = KeywordMatcher.normalize(label)
                return name if name and name in keywords else None
            keywords = sorted(keywords)
        for keyword in keywords:
            if KeywordMatcher.match_one(label, keyword, mode):
                return keyword
        return None

    @staticmethod
    def matches(label: str, keywords: Iterable[str], mode: str) -> bool:
        return KeywordMatcher.first_match(label, keywords, mode) is not None
