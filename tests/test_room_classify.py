"""
Tests for photoprep/processors/1_room_classify.py

RoomClassifier 단위 테스트:
- 티어 매칭
- 점수판 계산
- 판정 규칙 (최소 점수 + 2위 대비 배율)
"""

from photoprep.processors import RoomClassifier, RoomClassification
from photoprep.types import RoomType


class TestMatchTier:
    """match_tier 함수 테스트"""

    def test_strong_medium_weak(self):
        classifier = RoomClassifier()
        assert classifier.match_tier("oven", RoomType.KITCHEN) == "strong"
        assert classifier.match_tier("cup", RoomType.KITCHEN) == "medium"
        assert classifier.match_tier("chair", RoomType.KITCHEN) == "weak"

    def test_same_label_different_rooms(self):
        """같은 라벨이 방마다 다른 티어"""
        classifier = RoomClassifier()
        assert classifier.match_tier("chair", RoomType.DINING_ROOM) == "strong"
        assert classifier.match_tier("chair", RoomType.BEDROOM) == "medium"
        assert classifier.match_tier("chair", RoomType.LIVING_ROOM) == "weak"
        assert classifier.match_tier("chair", RoomType.BATHROOM) is None

    def test_exact_membership_only(self):
        """부분 문자열은 티어에 매칭되지 않음"""
        classifier = RoomClassifier()
        assert classifier.match_tier("toilet paper", RoomType.BATHROOM) == "medium"
        assert classifier.match_tier("kitchen sink", RoomType.KITCHEN) is None

    def test_case_insensitive(self):
        classifier = RoomClassifier()
        assert classifier.match_tier("Oven", RoomType.KITCHEN) == "strong"


class TestScore:
    """score 함수 테스트"""

    def test_scores_every_room(self, kitchen_scene):
        scores = RoomClassifier().score(kitchen_scene)
        assert set(scores.keys()) == {
            RoomType.KITCHEN, RoomType.BATHROOM, RoomType.BEDROOM,
            RoomType.LIVING_ROOM, RoomType.DINING_ROOM,
        }
        assert scores[RoomType.KITCHEN] == 7.0
        assert scores[RoomType.BATHROOM] == 0.0

    def test_one_detection_scores_several_rooms(self, make_detection):
        scores = RoomClassifier().score([make_detection("sink")])
        assert scores[RoomType.KITCHEN] == 5.0
        assert scores[RoomType.BATHROOM] == 5.0

    def test_ignores_confidence(self, make_detection):
        """방 추정은 신뢰도 필터와 무관"""
        scores = RoomClassifier().score([make_detection("toilet", confidence=0.01)])
        assert scores[RoomType.BATHROOM] == 5.0


class TestClassify:
    """classify 함수 테스트"""

    def test_kitchen(self, kitchen_scene):
        result = RoomClassifier().classify(kitchen_scene)
        assert isinstance(result, RoomClassification)
        assert result.room_type == RoomType.KITCHEN
        assert result.confidence == 7.0

    def test_bathroom_from_toilet_only(self, make_detection):
        result = RoomClassifier().classify([make_detection("toilet")])
        assert result.room_type == RoomType.BATHROOM
        assert result.confidence == 5.0

    def test_bedroom(self, make_detection):
        result = RoomClassifier().classify([make_detection("bed"), make_detection("pillow")])
        assert result.room_type == RoomType.BEDROOM
        assert result.confidence == 10.0

    def test_empty_input_is_general(self):
        result = RoomClassifier().classify([])
        assert result.room_type == RoomType.GENERAL
        assert result.confidence == 0.0
        assert all(score == 0.0 for score in result.scores.values())

    def test_below_floor_is_general(self, make_detection):
        """medium 단서만으로는 최소 점수 미달"""
        result = RoomClassifier().classify([make_detection("cup"), make_detection("plate")])
        assert result.scores[RoomType.KITCHEN] == 4.0
        assert result.room_type == RoomType.GENERAL
        assert result.confidence == 0.0

    def test_tie_is_general(self, make_detection):
        """동점이면 general"""
        result = RoomClassifier().classify([make_detection("sink")])
        assert result.room_type == RoomType.GENERAL

    def test_insufficient_margin_is_general(self, make_detection):
        """복도의 의자 + 램프: dining 5 vs bedroom 4 → 배율 미달"""
        result = RoomClassifier().classify([make_detection("chair"), make_detection("lamp")])
        assert result.scores[RoomType.DINING_ROOM] == 5.0
        assert result.scores[RoomType.BEDROOM] == 4.0
        assert result.room_type == RoomType.GENERAL

    def test_winner_never_below_floor(self, make_detection):
        """확정된 방의 점수는 항상 최소 점수 이상"""
        scenes = [
            [make_detection("cup")],
            [make_detection("light")] * 12,
            [make_detection("bed")],
            [make_detection("chair"), make_detection("chair"), make_detection("couch")],
            [make_detection("lamp"), make_detection("rug"), make_detection("cushion")],
        ]
        classifier = RoomClassifier()
        for scene in scenes:
            result = classifier.classify(scene)
            if result.room_type != RoomType.GENERAL:
                assert result.confidence >= 5.0
                assert result.scores[result.room_type] == result.confidence

    def test_order_independent(self, make_detection):
        scene = [
            make_detection("couch"), make_detection("lamp"),
            make_detection("tv"), make_detection("chair"), make_detection("rug"),
        ]
        classifier = RoomClassifier()
        forward = classifier.classify(scene)
        backward = classifier.classify(list(reversed(scene)))
        assert forward.room_type == backward.room_type == RoomType.LIVING_ROOM
        assert forward.confidence == backward.confidence
        assert forward.scores == backward.scores

    def test_custom_thresholds(self, make_detection):
        classifier = RoomClassifier(score_floor=2.0, margin_ratio=1.0)
        result = classifier.classify([make_detection("cup")])
        assert result.room_type == RoomType.KITCHEN
        assert result.confidence == 2.0

    def test_to_dict(self, kitchen_scene):
        data = RoomClassifier().classify(kitchen_scene).to_dict()
        assert data["room_type"] == "kitchen"
        assert data["confidence"] == 7.0
        assert data["scores"]["kitchen"] == 7.0
        assert data["scores"]["living_room"] == 0.0
