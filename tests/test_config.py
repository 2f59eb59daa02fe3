from relnet.config import SOLVER_CONFIG, SolverConfig


def test_defaults():
    cfg = SolverConfig()
    assert cfg.verify_min_cut is True
    assert cfg.record_residual_updates is True
    assert cfg.max_augmentations is None


def test_global_instance_uses_defaults():
    assert SOLVER_CONFIG == SolverConfig()


def test_augmentations_exceeded():
    assert not SolverConfig().augmentations_exceeded(10**6)
    cfg = SolverConfig(max_augmentations=3)
    assert not cfg.augmentations_exceeded(3)
    assert cfg.augmentations_exceeded(4)
