import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from k8sacc.errors import MissingParameterError  # noqa: E402
from k8sacc.params import Parameters  # noqa: E402
from k8sacc.providers.digitalocean import DigitalOceanParameters  # noqa: E402
from k8sacc.providers.eks import EksParameters  # noqa: E402


def test_get_is_exact_match():
    params = Parameters({"Cluster": "prod"})

    assert params.get("Cluster") == "prod"
    with pytest.raises(MissingParameterError) as exc:
        params.get("cluster")
    assert exc.value.name == "cluster"
    assert str(exc.value) == "Missing parameter cluster"


def test_get_optional():
    params = Parameters({"region": ""})

    assert params.get_optional("region") == ""
    assert params.get_optional("profile") is None
    assert "region" in params
    assert "profile" not in params


def test_digitalocean_requires_cluster():
    with pytest.raises(MissingParameterError) as exc:
        DigitalOceanParameters.from_parameters(Parameters({}))
    assert exc.value.name == "cluster"


def test_digitalocean_context_is_optional():
    record = DigitalOceanParameters.from_parameters(Parameters({"cluster": "test"}))
    assert record == DigitalOceanParameters(cluster="test", context=None)

    record = DigitalOceanParameters.from_parameters(
        Parameters({"cluster": "test", "context": "please"})
    )
    assert record == DigitalOceanParameters(cluster="test", context="please")


def test_eks_requires_name():
    with pytest.raises(MissingParameterError) as exc:
        EksParameters.from_parameters(Parameters({"region": "eu-central-1"}))
    assert exc.value.name == "name"


def test_eks_full_record():
    record = EksParameters.from_parameters(
        Parameters({"name": "johndoe", "region": "eu-central-1", "profile": "test"})
    )

    assert record == EksParameters(name="johndoe", region="eu-central-1", profile="test")


def test_unknown_parameters_are_ignored():
    record = EksParameters.from_parameters(Parameters({"name": "n1", "extra": "ignored"}))
    assert record == EksParameters(name="n1")


def test_eks_empty_parameters_report_name():
    with pytest.raises(MissingParameterError) as exc:
        EksParameters.from_parameters(Parameters({}))
    assert exc.value.name == "name"


def test_parameters_are_read_only_and_hashable():
    source = {"cluster": "c1"}
    params = Parameters(source)
    source["cluster"] = "changed"

    assert params.get("cluster") == "c1"
    with pytest.raises(TypeError):
        params.values["cluster"] = "c2"
    assert hash(params) == hash(Parameters({"cluster": "c1"}))
    assert params == Parameters({"cluster": "c1"})
