import sys
import argparse
import logging
from pathlib import Path

# Ensure we can import from cassino/
root = Path(__file__).parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve a card drop against a table snapshot")
    parser.add_argument("snapshot", type=Path, help="YAML or JSON drop request")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    # Set up logging before importing the engine
    from cassino import setup_logging

    setup_logging(debug=args.debug)

    import yaml

    from cassino.engine.build_value import display_value
    from cassino.gui.config import load_table_config
    from cassino.gui.services.contact import resolve_all_contacts, resolve_best_contact
    from cassino.gui.services.proximity import (
        determine_user_intent,
        find_different_rank_cards,
        find_same_rank_cards,
        safe_detect_proximity,
    )
    from cassino.schemas import ContactReport, DropRequest

    logger = logging.getLogger("play")

    config = load_table_config(args.config)
    request = DropRequest.model_validate(yaml.safe_load(args.snapshot.read_text()) or {})
    entities = request.entities()

    best = resolve_best_contact(request.point, entities, config)
    print(ContactReport.from_result(best).model_dump_json(indent=2))

    for entry in resolve_all_contacts(request.point, entities, config):
        logger.info(f"{entry.entity_type.value}: {entry.overlap_percentage:.0%} overlap")

    for entity in entities:
        if entity.cards:
            logger.info(f"{entity.type.value} {[c.card_id for c in entity.cards]} shows {display_value(entity)}")

    if request.card is not None:
        dropped = request.card.to_card()
        proximity = safe_detect_proximity(request.point, entities, dropped, config)
        intent = determine_user_intent(
            proximity,
            find_same_rank_cards(entities, dropped),
            find_different_rank_cards(entities, dropped),
        )
        logger.info(f"Intent: {intent.intent.value} ({intent.confidence.value}): {intent.reason}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
