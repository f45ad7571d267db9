"""Tests for the boundary-layer profile."""

import pytest
import torch


class TestSecond:
    def test_vanishes_at_both_ends(self):
        """Test that f(0) = f(1) = 0."""
        from torchspline.function import second

        y = second(torch.tensor([0.0, 1.0], dtype=torch.float64), 0.1)

        torch.testing.assert_close(
            y, torch.zeros(2, dtype=torch.float64), atol=1e-15, rtol=0.0
        )

    def test_symmetric(self):
        """Test that f(x) = f(1 - x)."""
        from torchspline.function import second

        x = torch.linspace(0, 1, 101, dtype=torch.float64)

        torch.testing.assert_close(second(x, 0.02), second(1 - x, 0.02))

    def test_first_derivative_antisymmetric(self):
        """Test that f1 = -f0 for the slopes."""
        from torchspline.function import second_boundary_derivative

        f0, f1 = second_boundary_derivative(0.3, order=1).tolist()

        assert f1 == -f0
        assert f0 > 0

    @pytest.mark.parametrize("order", [1, 2])
    def test_boundary_derivative_matches_autograd(self, order):
        """Test the closed forms against automatic differentiation."""
        from torchspline.function import second, second_boundary_derivative

        epsilon = 0.25
        x = torch.tensor([0.0, 1.0], dtype=torch.float64, requires_grad=True)
        (grad,) = torch.autograd.grad(
            second(x, epsilon).sum(), x, create_graph=True
        )
        if order == 2:
            (grad,) = torch.autograd.grad(grad.sum(), x)

        torch.testing.assert_close(
            second_boundary_derivative(epsilon, order=order),
            grad.detach(),
            rtol=1e-10,
            atol=1e-10,
        )

    def test_second_derivative_pair(self):
        """Test that both curvatures are -1/eps."""
        from torchspline.function import second_boundary_derivative

        assert second_boundary_derivative(0.5, order=2).tolist() == [-2.0, -2.0]

    def test_invalid_order(self):
        """Test that only first and second derivatives are available."""
        from torchspline.function import second_boundary_derivative

        with pytest.raises(ValueError):
            second_boundary_derivative(0.1, order=0)
