"""Tests for function family lookup."""

import math
import warnings

import pytest
import torch

FAMILIES = ["first", "second", "delta", "smooth", "custom"]


class TestResolve:
    def test_registry_covers_every_family(self):
        """Test that every enumerated family has an implementation."""
        from torchspline.function import FunctionFamily
        from torchspline.function._parametrized_function import _FAMILIES

        assert set(_FAMILIES) == set(FunctionFamily)

    @pytest.mark.parametrize("name", FAMILIES)
    def test_resolves_known_names(self, name):
        """Test that known names resolve without a warning."""
        import torchspline.function
        from torchspline.function import FunctionFamily, resolve

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            function = resolve(name, 0.2)

        assert function.family == FunctionFamily(name)
        assert function.epsilon == 0.2

        x = torch.linspace(0, 1, 9, dtype=torch.float64)
        evaluator = getattr(torchspline.function, name)
        derivative = getattr(torchspline.function, f"{name}_boundary_derivative")

        torch.testing.assert_close(function(x), evaluator(x, 0.2))
        torch.testing.assert_close(
            function.first_derivative, derivative(0.2, order=1)
        )
        torch.testing.assert_close(
            function.second_derivative, derivative(0.2, order=2)
        )

    def test_accepts_enum_member(self):
        """Test that FunctionFamily members resolve like their names."""
        from torchspline.function import FunctionFamily, resolve

        function = resolve(FunctionFamily.DELTA, 0.1)

        assert function.family is FunctionFamily.DELTA

    def test_unknown_name_falls_back_to_first(self):
        """Test that an unknown family warns and behaves as 'first'."""
        from torchspline.function import FunctionFamily, first, resolve

        with pytest.warns(RuntimeWarning, match="Unknown function family"):
            function = resolve("gaussian", 0.3)

        assert function.family is FunctionFamily.FIRST

        x = torch.linspace(0, 1, 11, dtype=torch.float64)
        torch.testing.assert_close(function(x), first(x, 0.3))

    @pytest.mark.parametrize("epsilon", [0.0, -0.1, math.nan, math.inf])
    def test_invalid_epsilon(self, epsilon):
        """Test that epsilon must be finite and positive."""
        from torchspline.function import resolve

        with pytest.raises(ValueError):
            resolve("first", epsilon)

    def test_boundary_values_follow_boundary_kind(self):
        """Test that slopes go with first_derivative, curvatures otherwise."""
        from torchspline.function import resolve
        from torchspline.spline import BoundaryCondition

        function = resolve("second", 0.1)

        assert torch.equal(
            function.boundary_values(BoundaryCondition.FIRST_DERIVATIVE),
            function.first_derivative,
        )
        assert torch.equal(
            function.boundary_values("second_derivative"),
            function.second_derivative,
        )
        assert torch.equal(
            function.boundary_values("natural"), function.second_derivative
        )

    @pytest.mark.parametrize("name", FAMILIES)
    def test_tiny_epsilon_is_finite(self, name):
        """Test that every family survives a very small epsilon."""
        from torchspline.function import resolve, sample

        function = resolve(name, 1e-4)
        _, y = sample(function, 101)

        assert bool(torch.all(torch.isfinite(y)))
        assert bool(torch.all(torch.isfinite(function.first_derivative)))
        assert bool(torch.all(torch.isfinite(function.second_derivative)))
