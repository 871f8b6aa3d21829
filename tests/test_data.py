import numpy as np
import pandas as pd
import pytest

from meandiff import CausalDataset, GenerationResult, TRUE_EFFECT, generate


class TestGenerate:
    def test_shapes_match_n(self):
        data = generate(1_000, seed=42).data
        assert len(data.covariate) == len(data.treatment) == len(data.outcome) == 1_000
        assert len(data) == 1_000

    def test_treatment_is_binary(self):
        data = generate(1_000, seed=42).data
        assert set(np.unique(data.treatment)) <= {0, 1}

    def test_true_effect_defaults_to_constant(self):
        sim = generate(10, seed=1)
        assert isinstance(sim, GenerationResult)
        assert sim.true_effect == TRUE_EFFECT == 5.0

    def test_true_effect_is_configurable(self):
        assert generate(10, seed=1, true_effect=2.5).true_effect == 2.5

    def test_same_seed_reproduces_dataset(self):
        first = generate(500, seed=123).data
        second = generate(500, seed=123).data
        np.testing.assert_array_equal(first.covariate, second.covariate)
        np.testing.assert_array_equal(first.treatment, second.treatment)
        np.testing.assert_array_equal(first.outcome, second.outcome)

    def test_different_seeds_differ(self):
        first = generate(500, seed=1).data
        second = generate(500, seed=2).data
        assert not np.array_equal(first.covariate, second.covariate)

    def test_calls_do_not_share_random_state(self):
        expected = generate(100, seed=7).data.outcome
        generate(100, seed=8)
        np.random.seed(0)
        np.testing.assert_array_equal(generate(100, seed=7).data.outcome, expected)

    def test_negative_seed_is_accepted_and_reproducible(self):
        first = generate(50, seed=-3).data
        second = generate(50, seed=-3).data
        np.testing.assert_array_equal(first.outcome, second.outcome)
        assert not np.array_equal(first.outcome, generate(50, seed=3).data.outcome)

    def test_zero_size_gives_empty_arrays(self):
        data = generate(0, seed=99).data
        assert len(data) == 0
        assert data.covariate.shape == data.treatment.shape == data.outcome.shape == (0,)

    def test_negative_size_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            generate(-1, seed=0)

    def test_outcome_follows_model(self):
        """With the effect removed, the residual outcome - covariate is pure N(0, 1) noise."""
        sim = generate(50_000, seed=5)
        d = sim.data
        noise = d.outcome - d.covariate - sim.true_effect * d.treatment
        assert abs(noise.mean()) < 0.03
        assert abs(noise.std() - 1.0) < 0.03

    def test_treatment_rises_with_covariate(self):
        d = generate(20_000, seed=11).data
        assert d.treatment[d.covariate > 1].all()
        assert not d.treatment[d.covariate < -1].any()
        assert d.covariate[d.treatment == 1].mean() > d.covariate[d.treatment == 0].mean()


class TestCausalDataset:
    def test_arrays_are_read_only(self):
        data = generate(10, seed=0).data
        with pytest.raises(ValueError):
            data.outcome[0] = 1.0

    def test_input_arrays_are_copied(self):
        outcome = np.array([1.0, 2.0])
        data = CausalDataset(covariate=[0.0, 0.0], treatment=[0, 1], outcome=outcome)
        outcome[0] = 99.0
        assert data.outcome[0] == 1.0

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="same length"):
            CausalDataset(covariate=[0.0, 1.0], treatment=[0, 1], outcome=[1.0])

    def test_non_binary_treatment_raises(self):
        with pytest.raises(ValueError, match="binary"):
            CausalDataset(covariate=[0.0, 1.0], treatment=[0, 2], outcome=[1.0, 2.0])

    def test_two_dimensional_array_raises(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            CausalDataset(covariate=np.zeros((2, 2)), treatment=[0, 1], outcome=[1.0, 2.0])

    def test_group_counts(self):
        data = CausalDataset(covariate=[0.0, 0.0, 0.0], treatment=[1, 0, 1], outcome=[1.0, 2.0, 3.0])
        assert data.n_treated == 2
        assert data.n_control == 1

    def test_frame_round_trip(self):
        data = generate(25, seed=3).data
        df = data.to_frame()
        assert list(df.columns) == ["covariate", "treatment", "outcome"]
        back = CausalDataset.from_frame(df)
        np.testing.assert_array_equal(back.outcome, data.outcome)

    def test_from_frame_missing_column_raises(self):
        df = pd.DataFrame({"covariate": [0.0], "treatment": [1]})
        with pytest.raises(ValueError, match="Outcome column"):
            CausalDataset.from_frame(df)

    def test_repr_shows_counts(self):
        data = CausalDataset(covariate=[0.0, 0.0], treatment=[1, 0], outcome=[1.0, 2.0])
        assert repr(data) == "CausalDataset(n=2, treated=1, control=1)"
