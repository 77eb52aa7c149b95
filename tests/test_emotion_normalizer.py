"""Tests for turning recognition replies into emotion results."""

import json

import pytest

from moodtag.models.emotion_models import Emotion, EmotionResult, Rectangle
from moodtag.services.emotion_normalizer import (
    most_likely_emotion, normalize_emotion_reply,
)
from tests.conftest import make_hit, make_scores


class TestMostLikelyEmotion:
    """Arg-max over a score set."""

    @pytest.mark.parametrize("emotion", list(Emotion))
    def test_unique_maximum_wins(self, emotion):
        score_set = {e: 0.05 for e in Emotion}
        score_set[emotion] = 0.6
        assert most_likely_emotion(score_set) == emotion

    def test_tie_goes_to_first_in_order(self):
        score_set = {e: 0.0 for e in Emotion}
        score_set[Emotion.Sadness] = 0.5
        score_set[Emotion.Fear] = 0.5
        assert most_likely_emotion(score_set) == Emotion.Fear

    def test_tie_between_first_and_last(self):
        score_set = {e: 0.0 for e in Emotion}
        score_set[Emotion.Surprise] = 0.4
        score_set[Emotion.Anger] = 0.4
        assert most_likely_emotion(score_set) == Emotion.Anger

    def test_all_zero_has_no_winner(self):
        assert most_likely_emotion({e: 0.0 for e in Emotion}) is None


class TestNormalizeEmotionReply:
    """Per-hit filtering and ordering."""

    def test_happiness_scenario(self, happy_reply):
        results = normalize_emotion_reply(happy_reply)
        assert results == [
            EmotionResult(rectangle=Rectangle(left=0, top=0, width=100, height=100), emotion=Emotion.Happiness)
        ]

    def test_all_zero_scores_drop_the_face(self):
        reply = [make_hit(top=5, left=5, width=50, height=50)]
        assert normalize_emotion_reply(reply) == []

    def test_integer_scores_are_accepted(self):
        hit = make_hit()
        hit["scores"] = {key: 0 for key in hit["scores"]}
        hit["scores"]["neutral"] = 1
        assert normalize_emotion_reply([hit])[0].emotion == Emotion.Neutral

    @pytest.mark.parametrize("missing", ["top", "left", "width", "height"])
    def test_missing_rectangle_key_skips_only_that_hit(self, missing):
        broken = make_hit(surprise=0.7)
        del broken["faceRectangle"][missing]
        reply = [broken, make_hit(top=10, left=20, width=30, height=40, sadness=0.8)]

        results = normalize_emotion_reply(reply)

        assert len(results) == 1
        assert results[0].emotion == Emotion.Sadness
        assert results[0].rectangle == Rectangle(left=20, top=10, width=30, height=40)

    @pytest.mark.parametrize("missing", [e.value for e in Emotion])
    def test_missing_score_key_skips_only_that_hit(self, missing):
        broken = make_hit(fear=0.9)
        del broken["scores"][missing]
        reply = [broken, make_hit(contempt=0.3)]

        results = normalize_emotion_reply(reply)

        assert [r.emotion for r in results] == [Emotion.Contempt]

    @pytest.mark.parametrize("value", [12.5, "12", None, True, -1])
    def test_non_integer_coordinate_skips_hit(self, value):
        hit = make_hit(happiness=0.9)
        hit["faceRectangle"]["width"] = value
        assert normalize_emotion_reply([hit]) == []

    @pytest.mark.parametrize("value", ["0.9", None, False, [0.9]])
    def test_non_numeric_score_skips_hit(self, value):
        hit = make_hit(anger=0.2)
        hit["scores"]["happiness"] = value
        assert normalize_emotion_reply([hit]) == []

    @pytest.mark.parametrize("raw", ["1" + "0" * 400, "-1" + "0" * 400, "Infinity", "NaN"])
    def test_unrepresentable_score_skips_only_that_hit(self, raw):
        hit = make_hit(happiness=0.2)
        hit["scores"]["anger"] = json.loads(raw)

        results = normalize_emotion_reply([hit, make_hit(fear=0.5)])

        assert [r.emotion for r in results] == [Emotion.Fear]

    @pytest.mark.parametrize("hit", [None, 3, "face", [], {}, {"faceRectangle": None, "scores": None}])
    def test_malformed_hits_are_ignored(self, hit):
        assert normalize_emotion_reply([hit, make_hit(disgust=0.4)])[0].emotion == Emotion.Disgust

    @pytest.mark.parametrize("payload", [{}, {"error": {"code": "Unauthorized"}}, "text", 42, None])
    def test_non_array_reply_is_empty(self, payload):
        assert normalize_emotion_reply(payload) == []

    def test_empty_array(self):
        assert normalize_emotion_reply([]) == []

    def test_order_is_preserved_through_json(self):
        emotions = [Emotion.Surprise, Emotion.Anger, Emotion.Neutral, Emotion.Happiness]
        reply = [
            make_hit(top=i, left=i * 2, width=10 + i, height=20 + i, **{emotion.value: 0.75})
            for i, emotion in enumerate(emotions)
        ]

        results = normalize_emotion_reply(json.loads(json.dumps(reply)))

        assert [r.emotion for r in results] == emotions
        assert [r.rectangle.top for r in results] == [0, 1, 2, 3]
        assert results[2].rectangle == Rectangle(left=4, top=2, width=12, height=22)

    def test_extra_keys_are_ignored(self):
        hit = make_hit(happiness=0.9)
        hit["faceId"] = "abc"
        hit["scores"]["confusion"] = 0.99
        assert normalize_emotion_reply([hit])[0].emotion == Emotion.Happiness


def test_make_scores_covers_every_emotion():
    assert set(make_scores()) == {e.value for e in Emotion}