from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from pymongo import DESCENDING, ReturnDocument

from core.domain.models.tarea import EstadoTarea
from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository


def _doc(**overrides):
    doc = {
        "_id": str(uuid4()),
        "title": "Tarea",
        "description": "Descripcion",
        "time": "02:30",
        "duration": 150,
        "createdAt": 1_700_000_000_000,
        "status": "todo",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def mock_mongo_collection():
    collection = MagicMock()
    return collection


@pytest.fixture
def mongo_repository(mock_mongo_collection):
    repo = MongoTareaRepository()
    repo.collection = mock_mongo_collection
    return repo


def test_insert_asigna_id_fecha_y_estado(mongo_repository, mock_mongo_collection):
    with patch(
        "infrastructure.mongo.repository.tarea_repository._ahora_ms",
        return_value=1_760_000_000_123,
    ):
        tarea = mongo_repository.insert("A", "B", "06:00", 360)

    mock_mongo_collection.insert_one.assert_called_once()
    documento = mock_mongo_collection.insert_one.call_args.args[0]
    assert documento == {
        "_id": str(tarea.id),
        "title": "A",
        "description": "B",
        "time": "06:00",
        "duration": 360,
        "createdAt": 1_760_000_000_123,
        "status": "todo",
    }
    assert tarea.status == EstadoTarea.PENDIENTE
    assert tarea.created_at == 1_760_000_000_123


def test_get_tarea_found(mongo_repository, mock_mongo_collection):
    doc = _doc(title="Found Tarea", status="inprogress")
    mock_mongo_collection.find_one.return_value = doc

    result = mongo_repository.get(doc["_id"])

    assert result is not None
    assert str(result.id) == doc["_id"]
    assert result.title == "Found Tarea"
    assert result.status == EstadoTarea.EN_PROGRESO
    assert result.created_at == doc["createdAt"]


def test_get_tarea_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    result = mongo_repository.get(uuid4())

    assert result is None


def test_list_tareas_ordena_por_created_at_desc(mongo_repository, mock_mongo_collection):
    docs = [_doc(title="Tarea 2", createdAt=2), _doc(title="Tarea 1", createdAt=1)]
    mock_mongo_collection.find.return_value.sort.return_value = docs

    results = mongo_repository.list()

    mock_mongo_collection.find.assert_called_once_with()
    mock_mongo_collection.find.return_value.sort.assert_called_once_with("createdAt", DESCENDING)
    assert [t.title for t in results] == ["Tarea 2", "Tarea 1"]


def test_list_by_status_filtra_por_valor(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find.return_value.sort.return_value = [_doc(status="done")]

    results = mongo_repository.list_by_status(EstadoTarea.COMPLETADA)

    mock_mongo_collection.find.assert_called_once_with({"status": "done"})
    mock_mongo_collection.find.return_value.sort.assert_called_once_with("createdAt", DESCENDING)
    assert results[0].status == EstadoTarea.COMPLETADA


def test_update_usa_set_y_devuelve_documento_nuevo(mongo_repository, mock_mongo_collection):
    tarea_id = uuid4()
    mock_mongo_collection.find_one_and_update.return_value = _doc(
        _id=str(tarea_id), time="00:15", duration=15, status="done"
    )

    result = mongo_repository.update(
        tarea_id, {"time": "00:15", "duration": 15, "status": EstadoTarea.COMPLETADA}
    )

    mock_mongo_collection.find_one_and_update.assert_called_once_with(
        {"_id": str(tarea_id)},
        {"$set": {"time": "00:15", "duration": 15, "status": "done"}},
        return_document=ReturnDocument.AFTER,
    )
    assert result.duration == 15
    assert result.status == EstadoTarea.COMPLETADA


def test_update_sin_cambios_solo_lee(mongo_repository, mock_mongo_collection):
    doc = _doc()
    mock_mongo_collection.find_one.return_value = doc

    result = mongo_repository.update(doc["_id"], {})

    mock_mongo_collection.find_one_and_update.assert_not_called()
    mock_mongo_collection.find_one.assert_called_once_with({"_id": doc["_id"]})
    assert result.title == doc["title"]


def test_update_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one_and_update.return_value = None

    assert mongo_repository.update(uuid4(), {"title": "x"}) is None


def test_eliminar_devuelve_documento_previo(mongo_repository, mock_mongo_collection):
    tarea_id = uuid4()
    mock_mongo_collection.find_one_and_delete.return_value = _doc(_id=str(tarea_id))

    result = mongo_repository.eliminar(tarea_id)

    mock_mongo_collection.find_one_and_delete.assert_called_once_with({"_id": str(tarea_id)})
    assert result.id == tarea_id


def test_eliminar_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one_and_delete.return_value = None

    assert mongo_repository.eliminar(uuid4()) is None


def test_errores_del_driver_se_propagan(mongo_repository, mock_mongo_collection):
    from pymongo.errors import ServerSelectionTimeoutError

    mock_mongo_collection.find.side_effect = ServerSelectionTimeoutError("timeout")

    with pytest.raises(ServerSelectionTimeoutError):
        mongo_repository.list()
