import occupancyabc as occ
import unittest
import numpy as np
import scipy.stats as st


class TestIndependentUniformPrior(unittest.TestCase):
    def setUp(self):
        self.bounds = [(0, 1), (2, 3), (4, 5)]
        self.names = ['x', 'y', 'z']
        self.prior = occ.IndependentUniformPrior(self.bounds, self.names)

    def test_pdf(self):
        theta = np.array([0.5, 2.5, 4.5])
        expected_pdf = 1 / (1 * 1 * 1)
        self.assertAlmostEqual(self.prior.pdf(theta), expected_pdf)

    def test_pdf_outside_support(self):
        self.assertEqual(self.prior.pdf(np.array([0.5, 3.5, 4.5])), 0)

    def test_sample(self):
        rg = np.random.default_rng(0)
        expected_sample = np.array([0.636962, 2.269787, 4.040974])
        np.testing.assert_allclose(self.prior.sample(rg), expected_sample, rtol=1e-5)


class TestIndependentPrior(unittest.TestCase):
    def setUp(self):
        self.marginals = [occ.truncated_normal(0.2, 0.1), st.beta(2, 20)]
        self.prior = occ.IndependentPrior(self.marginals, names=("e", "m"))

    def test_pdf(self):
        theta = np.array([0.25, 0.1])
        expected_pdf = self.marginals[0].pdf(0.25) * self.marginals[1].pdf(0.1)
        self.assertAlmostEqual(self.prior.pdf(theta), expected_pdf)

    def test_pdf_outside_unit_interval(self):
        self.assertEqual(self.prior.pdf(np.array([1.5, 0.1])), 0)

    def test_sample(self):
        sample = self.prior.sample(np.random.default_rng(0))
        expected_e = self.marginals[0].rvs(random_state=np.random.default_rng(0))
        self.assertEqual(sample.shape, (2,))
        self.assertAlmostEqual(sample[0], expected_e)
        self.assertTrue(0 <= sample[1] <= 1)


class TestTruncatedNormal(unittest.TestCase):
    def setUp(self):
        self.marginal = occ.truncated_normal(0.9, 0.5)

    def test_support(self):
        rg = np.random.default_rng(0)
        xs = self.marginal.rvs(size=1000, random_state=rg)
        self.assertTrue(np.all(xs >= 0))
        self.assertTrue(np.all(xs <= 1))

    def test_pdf(self):
        self.assertEqual(self.marginal.pdf(-0.1), 0)
        self.assertEqual(self.marginal.pdf(1.1), 0)
        self.assertGreater(self.marginal.pdf(0.9), st.norm(0.9, 0.5).pdf(0.9))


class TestOccupancyPrior(unittest.TestCase):
    def setUp(self):
        self.prior = occ.occupancy_prior(
            occ.truncated_normal(0.2, 0.1), occ.truncated_normal(0.3, 0.1), st.beta(2, 20)
        )

    def test_names(self):
        self.assertEqual(self.prior.names, ("e", "c", "m"))

    def test_sample(self):
        rg = np.random.default_rng(1)
        for _ in range(100):
            theta = self.prior.sample(rg)
            self.assertEqual(theta.shape, (3,))
            self.assertTrue(np.all((theta >= 0) & (theta <= 1)))

    def test_same_seed_same_sample(self):
        np.testing.assert_array_equal(
            self.prior.sample(np.random.default_rng(2)), self.prior.sample(np.random.default_rng(2))
        )
