"""
Machine: cursor de execução sobre uma Definition.

O Machine guarda o estado atual, avalia gates e dispara hooks em ordem
fixa. É síncrono e não reentrante: hooks rodam na thread do chamador e
exceções levantadas por eles propagam sem tratamento.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any

from config.settings.engine import (
    EngineSettings,
    ensure_valid_engine_settings,
    get_engine_settings,
)
from fsm_engine.definition.definition import Definition
from fsm_engine.types.record import TransitionRecord
from utils.errors import (
    CannotPerformTransitionError,
    MissingInitialStateError,
    NoTransitionError,
)

if TYPE_CHECKING:
    from fsm_engine.states.state import State
    from fsm_engine.transitions.transition import Transition
    from fsm_engine.types.hooks import Logger

logger = logging.getLogger(__name__)


class Machine:
    """
    Máquina de estados em execução.

    A Definition é compartilhada e tratada como somente leitura; vários
    Machines podem percorrer a mesma Definition.

    Attributes:
        definition: Definition executada
        current_state: Estado atual
        logger: Hook opcional que recebe uma linha legível por tentativa
        history: Transições executadas (cópia, limitada por settings)
    """

    __slots__ = ("_current_state", "_definition", "_history", "_session_id", "_settings", "logger")

    def __init__(
        self,
        definition: Definition,
        session_id: str = "",
        logger: Logger | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        """
        Inicializa o Machine no estado inicial da Definition.

        Args:
            definition: Topologia a executar
            session_id: Identificador da sessão para logs
            logger: Hook de diagnóstico (ex: print)
            settings: EngineSettings (usa get_engine_settings() se None)

        Raises:
            MissingInitialStateError: Definition sem estado inicial
            ValueError: EngineSettings inválidas (ex: FSM_HISTORY_LIMIT negativo)
        """
        if definition.initial_state is None:
            raise MissingInitialStateError("Definition sem estado inicial")

        self._definition = definition
        self._current_state: State = definition.initial_state
        self._session_id = session_id
        if settings is None:
            settings = get_engine_settings()
        self._settings = ensure_valid_engine_settings(settings)
        self._history: deque[TransitionRecord] = deque(maxlen=self._settings.history_limit)
        self.logger = logger

    @property
    def definition(self) -> Definition:
        """Definition executada."""
        return self._definition

    @property
    def current_state(self) -> State:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def session_id(self) -> str:
        """Identificador da sessão."""
        return self._session_id

    @property
    def history(self) -> list[TransitionRecord]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    def available_transitions(self) -> frozenset[str]:
        """Labels das transições que partem do estado atual."""
        return self._current_state.transition_labels()

    def can_perform_transition(self, label: str) -> bool:
        """
        Consulta se a transição pode ser disparada agora.

        Não muda estado nem dispara hooks; apenas avalia o gate.

        Raises:
            NoTransitionError: Estado atual sem transição com esse label
        """
        transition = self._transition_for(label)
        if transition.gate is None:
            return True
        return bool(transition.gate(self._current_state))

    def perform_transition(self, label: str) -> None:
        """
        Dispara a transição com o label informado.

        Ordem fixa dos efeitos:
            1. exit_action do estado de origem (com o estado de origem)
            2. current_state passa a ser o destino
            3. entry_action do destino (com o novo estado)
            4. action da transição (com o novo estado)

        Não é transacional: se 1 levantar, o estado não muda; se 3 ou 4
        levantarem, o Machine já está no novo estado.

        Raises:
            NoTransitionError: Estado atual sem transição com esse label
            CannotPerformTransitionError: Gate recusou; estado inalterado
        """
        transition = self._transition_for(label)
        source = self._current_state

        if transition.gate is not None and not transition.gate(source):
            self._report(
                f"Transition guard prevented {transition} from {source}",
                "gate_rejected",
                label,
            )
            raise CannotPerformTransitionError(label, source.label)

        if source.exit_action is not None:
            source.exit_action(source)

        new_state = transition.next_state
        self._report(
            f"{transition}: from {source} to new {new_state}",
            "performed",
            label,
            to_state=new_state.label,
        )
        self._current_state = new_state
        self._history.append(
            TransitionRecord(from_state=source.label, to_state=new_state.label, label=label)
        )

        if new_state.entry_action is not None:
            new_state.entry_action(new_state)

        if transition.action is not None:
            transition.action(new_state)

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "session_id": self._session_id,
            "current_state": self._current_state.label,
            "transition_count": len(self._history),
            "available_transitions": sorted(self.available_transitions()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Histórico em formato de dicts para logs."""
        return [record.to_log_dict() for record in self._history]

    def _transition_for(self, label: str) -> Transition:
        transition = self._current_state.transitions.get(label)
        if transition is None:
            self._report(
                f"Cannot find transition called {label} from {self._current_state}",
                "no_transition",
                label,
            )
            raise NoTransitionError(label, self._current_state.label)
        return transition

    def _report(self, message: str, result: str, label: str, **fields: str) -> None:
        if self.logger is not None:
            self.logger(message)

        if not self._settings.log_transitions:
            return

        level = logging.DEBUG if result == "performed" else logging.INFO
        logger.log(
            level,
            "fsm_transition_%s",
            result,
            extra={
                "component": "fsm_machine",
                "action": "perform_transition",
                "result": result,
                "session_id": self._session_id,
                "label": label,
                "from_state": self._current_state.label,
                **fields,
            },
        )


def create_machine(
    definition_text: str,
    session_id: str = "",
    logger: Logger | None = None,
) -> Machine:
    """
    Factory: interpreta a gramática numa Definition nova e cria o Machine.

    Como a Definition é nova, uma falha de parse não deixa topologia
    parcial visível para o chamador.

    Raises:
        InvalidRuleError: Texto fora da gramática
        MissingInitialStateError: Texto sem nenhuma regra
    """
    definition = Definition()
    definition.process_definition_formats(definition_text)
    return Machine(definition, session_id=session_id, logger=logger)
