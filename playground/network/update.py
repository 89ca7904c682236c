import logging

logger = logging.getLogger(__name__)


def update_weights(network, learning_rate: float, regularization_rate: float):
    """Applies the accumulated mini-batch gradients, then weight decay.

    Biases and weights move by the average of their accumulated derivatives.
    A link whose regularization prunes on zero crossing (L1) and whose decay
    step would flip the weight's sign is pruned instead. Accumulators are
    cleared for everything that was stepped.
    """
    nodes, links = network.nodes, network.links

    for layer in network.layers[1:]:
        for nid in layer:
            node = nodes[nid]
            if node.num_accumulated_ders > 0:
                node.bias -= learning_rate * node.acc_input_der / node.num_accumulated_ders
                node.acc_input_der = 0.0
                node.num_accumulated_ders = 0

            for lid in node.input_links:
                link = links[lid]
                if link.is_dead or link.num_accumulated_ders == 0:
                    continue

                link.weight -= (learning_rate / link.num_accumulated_ders) * link.acc_error_der

                regularization = link.regularization
                if regularization is not None:
                    reg_der = regularization.derivative(link.weight)
                    new_weight = link.weight - learning_rate * regularization_rate * reg_der
                    if getattr(regularization, "prune_on_zero_crossing", False) and link.weight * new_weight < 0:
                        link.prune()
                        logger.debug(f"Pruned link {link.id}")
                    else:
                        link.weight = new_weight

                link.acc_error_der = 0.0
                link.num_accumulated_ders = 0
