import pytest
from pydantic import ValidationError

from rabat_landmarks.schemas.landmark import Landmark, LandmarkCreate

from conftest import make_landmark


def test_accepts_camel_case_and_dumps_by_alias():
    landmark = LandmarkCreate.model_validate({
        "name": "Bab el Had",
        "slug": "bab-el-had",
        "description": "Gate.",
        "shortDescription": "Gate.",
        "imageUrl": "https://example.org/gate.jpg",
        "location": "Rabat",
        "openingHours": "Open 24 hours",
        "latitude": "34.0206",
        "longitude": "-6.8419",
        "vrModelUrl": "/vr/bab-el-had.gltf",
    })

    dumped = landmark.model_dump(by_alias=True, exclude_none=True)
    assert dumped["shortDescription"] == "Gate."
    assert dumped["vrModelUrl"] == "/vr/bab-el-had.gltf"
    assert "vrSceneConfig" not in dumped


@pytest.mark.parametrize("slug", ["Hassan-Tower", "hassan tower", "-chellah", "bab--rouah", ""])
def test_rejects_slugs_that_are_not_url_safe(slug):
    with pytest.raises(ValidationError):
        LandmarkCreate(**make_landmark(slug=slug))


@pytest.mark.parametrize(
    "field,value",
    [("latitude", "north"), ("latitude", "95.0"), ("longitude", "-181"), ("longitude", "NaN")],
)
def test_rejects_invalid_coordinates(field, value):
    with pytest.raises(ValidationError):
        LandmarkCreate(**make_landmark(**{field: value}))


def test_coordinates_stay_strings():
    landmark = LandmarkCreate(**make_landmark(latitude="34.0200", longitude="-6.8400"))
    assert landmark.latitude == "34.0200"
    assert landmark.longitude == "-6.8400"


def test_rejects_blank_required_text():
    with pytest.raises(ValidationError):
        LandmarkCreate(**make_landmark(name="   "))


def test_scene_config_is_passed_through():
    config = {"cameraPosition": {"x": 1, "y": 2, "z": 3}, "fog": True}
    landmark = LandmarkCreate(**make_landmark(vr_scene_config=config))
    assert landmark.vr_scene_config == config


def test_landmark_is_frozen():
    landmark = Landmark(id=1, **make_landmark())
    with pytest.raises(ValidationError):
        landmark.slug = "other"
