"""Tests for the ranking engine."""

import pytest

from embedstore.exceptions import ValidationError
from embedstore.index.ranking import rank
from embedstore.index.vector_math import cosine_similarity


@pytest.fixture
def populated(store):
    """Store with three 'a' items and one 'b' item."""
    store.insert("north", "a", [1.0, 0.0], "m")
    store.insert("north-east", "a", [1.0, 1.0], "m")
    store.insert("east", "a", [0.0, 1.0], "m")
    store.insert("south", "b", [0.0, -1.0], "m")
    return store


class TestRank:
    """Tests for rank."""
    
    def test_sorted_by_descending_similarity(self, populated):
        results = rank(populated, [1.0, 0.2], top_k=10)
        
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert [r.text for r in results] == ["north", "north-east", "east", "south"]
        for r in results:
            item = populated.get(r.id)
            assert r.score == pytest.approx(cosine_similarity([1.0, 0.2], item.vector))
    
    def test_type_filter(self, populated):
        results = rank(populated, [1.0, 0.0], embedding_type="b", top_k=5)
        
        assert len(results) == 1
        assert results[0].text == "south"
        assert results[0].embedding_type == "b"
    
    def test_top_k_bound(self, populated):
        assert len(rank(populated, [1.0, 0.0], top_k=2)) == 2
        assert len(rank(populated, [1.0, 0.0], top_k=4)) == 4
        assert len(rank(populated, [1.0, 0.0], top_k=50)) == 4
        assert len(rank(populated, [1.0, 0.0], embedding_type="a", top_k=50)) == 3
    
    def test_ties_keep_insertion_order(self, store):
        store.insert("first", "", [2.0, 0.0], "m")
        store.insert("other", "", [0.0, 1.0], "m")
        store.insert("second", "", [1.0, 0.0], "m")
        store.insert("third", "", [5.0, 0.0], "m")
        
        results = rank(store, [1.0, 0.0], top_k=3)
        
        assert [r.text for r in results] == ["first", "second", "third"]
    
    def test_empty_store(self, store):
        assert rank(store, [1.0, 0.0], top_k=5) == []
    
    def test_all_filtered_out(self, populated):
        assert rank(populated, [1.0, 0.0], embedding_type="missing", top_k=5) == []
    
    def test_dimensionality_mismatch_skipped(self, store):
        store.insert("small", "", [1.0, 0.0], "small-model")
        store.insert("large", "", [1.0, 0.0, 0.0], "large-model")
        
        results = rank(store, [0.5, 0.5, 0.5], top_k=5)
        
        assert [r.text for r in results] == ["large"]
        assert rank(store, [1.0, 0.0, 0.0, 0.0], top_k=5) == []
    
    def test_zero_vectors_not_comparable(self, store):
        store.insert("zero", "", [0.0, 0.0], "m")
        store.insert("unit", "", [1.0, 0.0], "m")
        
        assert [r.text for r in rank(store, [1.0, 0.0], top_k=5)] == ["unit"]
        assert rank(store, [0.0, 0.0], top_k=5) == []
    
    @pytest.mark.parametrize("top_k", [0, -1])
    def test_non_positive_top_k(self, populated, top_k):
        with pytest.raises(ValidationError):
            rank(populated, [1.0, 0.0], top_k=top_k)
    
    def test_include_embeddings(self, populated):
        with_vectors = rank(populated, [1.0, 0.0], top_k=1, include_embeddings=True)
        without = rank(populated, [1.0, 0.0], top_k=1)
        
        assert with_vectors[0].vector == [1.0, 0.0]
        assert without[0].vector is None
    
    def test_result_fields(self, populated):
        result = rank(populated, [0.0, -1.0], top_k=1)[0]
        
        assert result.text == "south"
        assert result.embedding_type == "b"
        assert result.model == "m"
        assert result.score == pytest.approx(1.0)
    
    def test_exclude_text(self, populated):
        results = rank(populated, [1.0, 0.0], top_k=5, exclude_text="north")
        
        assert "north" not in [r.text for r in results]
        assert len(results) == 3
    
    def test_large_magnitudes_scored_correctly(self, store):
        store.insert("huge", "", [1e200, 1e200], "m")
        store.insert("tiny", "", [1e-200, -1e-200], "m")
        
        results = rank(store, [1.0, 1.0], top_k=5)
        
        assert [r.text for r in results] == ["huge", "tiny"]
        assert results[0].score == pytest.approx(1.0)
        assert results[1].score == pytest.approx(0.0, abs=1e-12)
