"""Tests for max-norm spline error."""

import math

import pytest
import torch

FAMILIES = ["first", "second", "delta", "smooth", "custom"]


class TestMaxError:
    def test_delta_scenario(self):
        """Test the peaked delta function on an 11-point natural spline."""
        from torchspline.comparison import max_error
        from torchspline.function import resolve, sample
        from torchspline.spline import cubic_spline_evaluate, cubic_spline_fit

        function = resolve("delta", 0.1)

        assert function(torch.tensor(0.5, dtype=torch.float64)).item() == 1.0

        x, y = sample(function, 11)
        spline = cubic_spline_fit(x, y, boundary="natural")

        peak = cubic_spline_evaluate(spline, 0.5).item()
        assert abs(peak - 1.0) < 1e-3

        error = max_error(function, spline, 11)
        assert 0.0 < error < 0.05

    def test_linear_function_has_no_error(self):
        """Test that a straight line is reproduced at every midpoint."""
        from torchspline.comparison import max_error
        from torchspline.function import sample
        from torchspline.spline import cubic_spline_fit

        def line(t):
            return -1.5 * t + 0.25

        x, y = sample(line, 9)
        values = {
            "first_derivative": torch.tensor([-1.5, -1.5]).double(),
            "second_derivative": torch.zeros(2).double(),
            "natural": None,
        }

        for boundary, boundary_values in values.items():
            spline = cubic_spline_fit(x, y, boundary, boundary_values)
            assert max_error(line, spline, 1001) < 1e-12

    @pytest.mark.parametrize("name", FAMILIES)
    def test_round_trip_at_knots(self, name):
        """Test that a natural spline returns its 50 samples."""
        from torchspline.function import resolve, sample
        from torchspline.spline import cubic_spline_evaluate, cubic_spline_fit

        function = resolve(name, 0.1)
        x, y = sample(function, 50)
        spline = cubic_spline_fit(x, y, boundary="natural")

        torch.testing.assert_close(
            cubic_spline_evaluate(spline, x), y, atol=1e-9, rtol=1e-9
        )

    def test_error_shrinks_with_refinement(self):
        """Test that more knots fit the bump better."""
        from torchspline.comparison import max_error
        from torchspline.function import resolve, sample
        from torchspline.spline import cubic_spline_fit

        function = resolve("delta", 0.1)

        errors = []
        for n in (11, 41):
            x, y = sample(function, n)
            spline = cubic_spline_fit(x, y, boundary="natural")
            errors.append(max_error(function, spline, 1001))

        assert errors[1] < errors[0]

    def test_nan_is_reported(self):
        """Test that NaN deviations are not dropped."""
        from torchspline.comparison import max_error
        from torchspline.spline import cubic_spline_fit

        x = torch.linspace(0, 1, 5, dtype=torch.float64)
        spline = cubic_spline_fit(x, x)

        error = max_error(lambda t: torch.full_like(t, math.nan), spline, 5)

        assert math.isnan(error)

    def test_too_few_points(self):
        """Test that the reference partition needs a cell."""
        from torchspline.comparison import max_error
        from torchspline.spline import cubic_spline_fit

        x = torch.linspace(0, 1, 5, dtype=torch.float64)
        spline = cubic_spline_fit(x, x)

        with pytest.raises(ValueError):
            max_error(lambda t: t, spline, 1)
